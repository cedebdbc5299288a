"""Define types for scheduled plane movements."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from airport_sim.types.util import AirportCode, TailNumber


class MovementAction(Enum):
    """The requests a plane can make of an airport."""

    LAND = "land"
    TAKE_OFF = "take_off"
    CONFIRM_TAKE_OFF = "confirm_take_off"


@dataclass
class Movement:
    """A single request for a plane to land, take off, or confirm its take-off.

    Attributes:
        tail_number: The tail number of the plane making the request.
        airport_code: The code of the airport handling the request.
        action: What the plane is asking to do.
    """

    tail_number: TailNumber
    airport_code: AirportCode
    action: MovementAction

    def __str__(self) -> str:
        return f"{self.tail_number}_{self.action.value}_{self.airport_code}"


@dataclass
class MovementOutcome:
    """The result of applying a movement to an airport network.

    Attributes:
        movement: The movement that was applied.
        succeeded: Whether the airport accepted the movement.
        message: The confirmation or error message, if any.
        error: The name of the error raised when the movement was refused.
    """

    movement: Movement
    succeeded: bool
    message: Optional[str] = None
    error: Optional[str] = None
