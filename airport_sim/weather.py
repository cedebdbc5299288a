"""Define the weather sources that airports consult before planes move."""
from typing import Protocol, Union

import pyro
import pyro.distributions as dist
import torch

from airport_sim.types.util import Weather

DEFAULT_STORM_PROBABILITY = 0.5


class WeatherSource(Protocol):
    """Anything an airport can ask for the current weather."""

    def check(self) -> Weather:
        ...


class WeatherSystem:
    """Random weather, stormy with a fixed probability.

    Each check draws from a Bernoulli distribution at its own pyro sample site,
    named "{var_prefix}weather_{n}" for the n-th check, so that the weather can
    be traced or conditioned with pyro's effect handlers.

    Args:
        storm_probability: The probability that a check returns stormy weather.
        var_prefix: The prefix for sampled variable names.
    """

    def __init__(
        self,
        storm_probability: Union[float, torch.Tensor] = DEFAULT_STORM_PROBABILITY,
        var_prefix: str = "",
    ):
        if not isinstance(storm_probability, torch.Tensor):
            storm_probability = torch.tensor(float(storm_probability))
        if storm_probability < 0.0 or storm_probability > 1.0:
            raise ValueError(
                f"storm_probability must be between 0 and 1, got {storm_probability}"
            )

        self.storm_probability = storm_probability
        self.var_prefix = var_prefix
        self.num_checks = 0

    def site_name(self, index: int) -> str:
        """Return the name of the sample site for the index-th check."""
        return f"{self.var_prefix}weather_{index}"

    def check(self) -> Weather:
        stormy = pyro.sample(
            self.site_name(self.num_checks),
            dist.Bernoulli(probs=self.storm_probability),
        )
        self.num_checks += 1
        return Weather.STORMY if stormy.item() else Weather.SUNSHINE

    def __repr__(self) -> str:
        return (
            f"WeatherSystem(storm_probability={float(self.storm_probability)}, "
            f"var_prefix={self.var_prefix!r})"
        )


class FixedWeather:
    """Weather that follows a given forecast, repeating its last entry.

    Args:
        forecast: The weather labels to return, in order.
    """

    def __init__(self, *forecast: Weather):
        if not forecast:
            raise ValueError("FixedWeather needs at least one forecast entry")
        self.forecast = list(forecast)
        self.num_checks = 0

    def check(self) -> Weather:
        weather = self.forecast[min(self.num_checks, len(self.forecast) - 1)]
        self.num_checks += 1
        return weather
