"""Define a class representing a plane."""
import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from airport_sim.types.util import TailNumber

if TYPE_CHECKING:
    from airport_sim.types.airport import Airport

_tail_numbers = itertools.count(1)


def _next_tail_number() -> TailNumber:
    return f"N{next(_tail_numbers):04d}"


class PlaneStatus(Enum):
    """Where a plane is in its land/take-off cycle."""

    IN_FLIGHT = "in_flight"
    LANDED = "landed"
    DEPARTED = "departed"


@dataclass(eq=False)
class Plane:
    """A plane that can land at and take off from airports.

    Planes compare by identity. The location tag is maintained by the airports
    the plane visits and should not be set directly.

    Attributes:
        tail_number: The registration used to identify the plane in messages.
        status: Whether the plane is flying, landed, or departed but unconfirmed.
        location: The airport whose hangar currently holds the plane, if any.
    """

    tail_number: TailNumber = field(default_factory=_next_tail_number)
    status: PlaneStatus = PlaneStatus.IN_FLIGHT
    location: Optional["Airport"] = field(default=None, repr=False)

    @property
    def landed(self) -> bool:
        return self.status == PlaneStatus.LANDED

    def __str__(self) -> str:
        return self.tail_number
