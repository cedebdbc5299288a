"""Define types used in the airport simulation."""
from airport_sim.types.airport import Airport
from airport_sim.types.movement import Movement, MovementAction, MovementOutcome
from airport_sim.types.plane import Plane, PlaneStatus
from airport_sim.types.util import DEFAULT_CAPACITY, AirportCode, TailNumber, Weather

__all__ = [
    "AirportCode",
    "TailNumber",
    "Weather",
    "DEFAULT_CAPACITY",
    "Plane",
    "PlaneStatus",
    "Airport",
    "Movement",
    "MovementAction",
    "MovementOutcome",
]
