"""Simulate planes landing at and taking off from airports in changing weather."""
from airport_sim.types import DEFAULT_CAPACITY, Airport, Plane, Weather
from airport_sim.weather import FixedWeather, WeatherSource, WeatherSystem

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CAPACITY",
    "Airport",
    "Plane",
    "Weather",
    "WeatherSource",
    "WeatherSystem",
    "FixedWeather",
]
