"""Define types for airports that planes land at and take off from."""
import logging
import numbers
from dataclasses import dataclass, field
from typing import Optional

from airport_sim.errors import (
    AlreadyLandedError,
    HangarEmptyError,
    HangarFullError,
    LandedElsewhereError,
    NotYetDepartedError,
    PlaneNotPresentError,
    StormError,
)
from airport_sim.types.plane import Plane, PlaneStatus
from airport_sim.types.util import DEFAULT_CAPACITY, AirportCode, Weather
from airport_sim.weather import WeatherSource, WeatherSystem

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Airport:
    """Represents a single airport with a hangar of limited size.

    Planes may only land or take off when the weather source reports sunshine.
    Every operation checks all of its preconditions before touching the hangar,
    so a refused operation leaves both the airport and the plane unchanged.

    Attributes:
        capacity: The maximum number of planes the hangar can hold.
        weather: The weather source consulted before each landing and take-off.
            Defaults to a WeatherSystem whose sample sites are prefixed with the
            airport code.
        code: The airport code.
        hangar: The planes currently at the airport, in order of arrival. Starts
            empty; planes only enter it by landing.
        departed: Planes that have taken off but whose departure has not been
            confirmed yet.
    """

    capacity: int = DEFAULT_CAPACITY
    weather: Optional[WeatherSource] = None
    code: AirportCode = ""
    hangar: list[Plane] = field(default_factory=list, init=False)
    departed: list[Plane] = field(default_factory=list, init=False)

    def __post_init__(self):
        if isinstance(self.capacity, bool) or not isinstance(
            self.capacity, numbers.Integral
        ):
            raise ValueError(f"capacity must be an integer, got {self.capacity!r}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be positive, got {self.capacity}")
        self.capacity = int(self.capacity)

        # Airports need distinct sample site names to share one pyro trace
        if self.weather is None:
            self.weather = WeatherSystem(
                var_prefix=f"{self.code}_" if self.code else ""
            )

    @property
    def is_full(self) -> bool:
        return len(self.hangar) >= self.capacity

    @property
    def is_empty(self) -> bool:
        return len(self.hangar) == 0

    def __contains__(self, plane: Plane) -> bool:
        return plane in self.hangar

    def weather_check(self) -> Weather:
        """Ask the weather source whether it is sunny or stormy."""
        return self.weather.check()

    def land(self, plane: Plane) -> None:
        """Land a plane and park it in the hangar.

        Args:
            plane: The plane to land.

        Raises:
            AlreadyLandedError: if the plane is already in this hangar.
            LandedElsewhereError: if the plane is parked at another airport.
            StormError: if the weather is stormy.
            HangarFullError: if the hangar is at capacity.
        """
        if plane in self:
            raise AlreadyLandedError()
        if plane.location is not None:
            raise LandedElsewhereError()
        if self.weather_check() == Weather.STORMY:
            raise StormError("Plane cannot land during storm!")
        if self.is_full:
            raise HangarFullError()

        # A plane landing here is no longer waiting for a departure confirmation
        if plane in self.departed:
            self.departed.remove(plane)

        self.hangar.append(plane)
        plane.location = self
        plane.status = PlaneStatus.LANDED
        logger.debug(f"{plane} landed at {self.code}")

    def take_off(self, plane: Plane) -> None:
        """Release a plane from the hangar.

        The plane stays on the departed list until the take-off is confirmed.

        Args:
            plane: The plane to take off.

        Raises:
            HangarEmptyError: if there are no planes in the hangar.
            PlaneNotPresentError: if the plane is not in the hangar.
            StormError: if the weather is stormy.
        """
        if self.is_empty:
            raise HangarEmptyError()
        if plane not in self:
            raise PlaneNotPresentError()
        if self.weather_check() == Weather.STORMY:
            raise StormError("Plane cannot take off during storm!")

        self.hangar.remove(plane)
        self.departed.append(plane)
        plane.location = None
        plane.status = PlaneStatus.DEPARTED
        logger.debug(f"{plane} took off from {self.code}")

    def confirm_take_off(self, plane: Plane) -> str:
        """Confirm that a plane which took off from here has left.

        Args:
            plane: The plane to confirm.

        Returns:
            A confirmation message naming the plane.

        Raises:
            NotYetDepartedError: if the plane has not taken off from here.
        """
        if plane not in self.departed:
            raise NotYetDepartedError(plane)

        self.departed.remove(plane)
        if plane.status == PlaneStatus.DEPARTED:
            plane.status = PlaneStatus.IN_FLIGHT
        return f"Confirmed: {plane} has taken off!"

    def __repr__(self) -> str:
        return (
            f"Airport(code={self.code!r}, capacity={self.capacity}, "
            f"hangar={[str(plane) for plane in self.hangar]})"
        )
