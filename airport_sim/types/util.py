"""Define utility types and constants for the airport simulation."""
from enum import Enum

AirportCode = str
TailNumber = str

DEFAULT_CAPACITY = 20


class Weather(Enum):
    """The two weather labels an airport can observe."""

    SUNSHINE = "Sunshine"
    STORMY = "Stormy"

    def __str__(self) -> str:
        return self.value
