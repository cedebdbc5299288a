"""Define the errors raised by airport operations."""


class AirportError(Exception):
    """Base exception for all refused airport operations"""

    message = "Airport operation refused!"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class AlreadyLandedError(AirportError):
    """Raised when a plane tries to land where it is already parked"""

    message = "Plane has already landed!"


class LandedElsewhereError(AirportError):
    """Raised when a plane tries to land while parked at another airport"""

    message = "Plane has already landed at another airport!"


class StormError(AirportError):
    """Raised when the weather is stormy"""

    message = "Plane cannot fly during storm!"


class HangarFullError(AirportError):
    """Raised when a plane tries to land at a full airport"""

    message = "Unable to land when airport full!"


class HangarEmptyError(AirportError):
    """Raised when a plane tries to take off from an empty airport"""

    message = "There are no planes left at this airport!"


class PlaneNotPresentError(AirportError):
    """Raised when a plane tries to take off from an airport it is not at"""

    message = "That plane is not at the airport!"


class NotYetDepartedError(AirportError):
    """Raised when confirming the take-off of a plane that has not taken off"""

    def __init__(self, plane):
        super().__init__(f"{plane} has not taken off!")
        self.plane = plane
