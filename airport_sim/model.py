"""Define a probabilistic model for a day of airport operations."""
from copy import deepcopy
from typing import Optional

import pyro
import pyro.distributions as dist
import torch

from airport_sim.network import AirportNetwork
from airport_sim.weather import WeatherSystem


def airport_operations_model(
    networks: list[AirportNetwork],
    storm_probability: Optional[torch.Tensor] = None,
    device=None,
) -> list[AirportNetwork]:
    """
    Simulate the movements in each network under random weather.

    Args:
        networks: the starting states of the simulation (will replay each one
            independently, one per day).
        storm_probability: the probability that a weather check is stormy. If not
            given, it is sampled from a Beta(2, 2) prior shared by all days.
        device: the device to create tensors on

    Returns:
        the replayed networks, with their outcomes recorded
    """
    if device is None:
        device = torch.device("cpu")

    # Copy the networks to avoid modifying them
    networks = deepcopy(networks)

    if storm_probability is None:
        storm_probability = pyro.sample(
            "storm_probability",
            dist.Beta(
                torch.tensor(2.0, device=device), torch.tensor(2.0, device=device)
            ),
        )

    output_networks = []
    for day_ind in pyro.markov(range(len(networks)), history=1):
        network = networks[day_ind]
        var_prefix = f"day{day_ind}_"

        # Every airport gets its own stream of weather sample sites
        for airport in network.airports.values():
            airport.weather = WeatherSystem(
                storm_probability, var_prefix=f"{var_prefix}{airport.code}_"
            )

        network.run()
        output_networks.append(network)

    return output_networks
