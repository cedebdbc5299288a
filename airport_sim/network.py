"""Define the network of airports that a movement schedule is replayed against"""
import logging
from dataclasses import dataclass, field

import pandas as pd

from airport_sim.errors import AirportError
from airport_sim.types import (
    Airport,
    AirportCode,
    Movement,
    MovementAction,
    MovementOutcome,
    Plane,
    TailNumber,
)

logger = logging.getLogger(__name__)


@dataclass
class AirportNetwork:
    """The state of a set of airports and the planes moving between them.

    Attributes:
        airports: A dictionary mapping airport codes to Airport objects.
        planes: A dictionary mapping tail numbers to Plane objects.
        pending_movements: Movements that have not been applied yet, in the order
            they will be applied.
        outcomes: The outcomes of the movements applied so far.
    """

    airports: dict[AirportCode, Airport]
    planes: dict[TailNumber, Plane]
    pending_movements: list[Movement]
    outcomes: list[MovementOutcome] = field(default_factory=list)

    @classmethod
    def from_lists(
        cls,
        airports: list[Airport],
        planes: list[Plane],
        pending_movements: list[Movement],
    ) -> "AirportNetwork":
        """Build a network from the lists returned by parse_schedule."""
        return cls(
            airports={airport.code: airport for airport in airports},
            planes={plane.tail_number: plane for plane in planes},
            pending_movements=list(pending_movements),
        )

    @property
    def complete(self):
        """Return True if every movement has been applied."""
        return len(self.pending_movements) == 0

    def apply(self, movement: Movement) -> MovementOutcome:
        """Apply a single movement, recording a refusal instead of raising it.

        Args:
            movement: The movement to apply.

        Returns:
            The outcome of the movement.

        Raises:
            KeyError: if the movement names an unknown airport or plane.
        """
        airport = self.airports[movement.airport_code]
        plane = self.planes[movement.tail_number]

        try:
            message = None
            if movement.action == MovementAction.LAND:
                airport.land(plane)
            elif movement.action == MovementAction.TAKE_OFF:
                airport.take_off(plane)
            else:
                message = airport.confirm_take_off(plane)
        except AirportError as error:
            logger.info(f"{movement} refused: {error}")
            outcome = MovementOutcome(
                movement=movement,
                succeeded=False,
                message=str(error),
                error=type(error).__name__,
            )
        else:
            logger.debug(f"{movement} accepted")
            outcome = MovementOutcome(
                movement=movement, succeeded=True, message=message
            )

        self.outcomes.append(outcome)
        return outcome

    def step(self) -> MovementOutcome:
        """Pop the next pending movement and apply it.

        Raises:
            IndexError: if there are no pending movements.
        """
        if self.complete:
            raise IndexError("No pending movements left to apply")

        return self.apply(self.pending_movements.pop(0))

    def run(self) -> list[MovementOutcome]:
        """Apply all pending movements and return their outcomes."""
        outcomes = []
        while not self.complete:
            outcomes.append(self.step())

        return outcomes

    def outcomes_frame(self) -> pd.DataFrame:
        """Return the outcomes recorded so far as a pandas dataframe."""
        return pd.DataFrame(
            {
                "tail_number": [o.movement.tail_number for o in self.outcomes],
                "airport": [o.movement.airport_code for o in self.outcomes],
                "action": [o.movement.action.value for o in self.outcomes],
                "succeeded": [o.succeeded for o in self.outcomes],
                "message": [o.message for o in self.outcomes],
                "error": [o.error for o in self.outcomes],
            },
            columns=[
                "tail_number",
                "airport",
                "action",
                "succeeded",
                "message",
                "error",
            ],
        )
