"""Run the airport operations model for a simple two-airport schedule."""
import logging

import pandas as pd
import pyro
import pyro.poutine as poutine

from airport_sim.model import airport_operations_model
from airport_sim.network import AirportNetwork
from airport_sim.schedule import parse_schedule


def main():
    pyro.enable_validation(True)
    pyro.set_rng_seed(1)
    logging.basicConfig(level=logging.INFO)

    # Two planes shuttle between a small airfield and a hub, each day
    networks = []
    for _ in range(10):
        schedule = pd.DataFrame(
            {
                "tail_number": [
                    "G-ABCD",
                    "G-EFGH",
                    "G-ABCD",
                    "G-ABCD",
                    "G-EFGH",
                    "G-ABCD",
                ],
                "airport": ["A1", "A1", "A1", "A1", "A2", "A2"],
                "action": [
                    "land",
                    "land",
                    "take_off",
                    "confirm_take_off",
                    "land",
                    "land",
                ],
            }
        )
        movements, airports, planes = parse_schedule(schedule, capacities={"A1": 1})
        networks.append(AirportNetwork.from_lists(airports, planes, movements))

    trace = poutine.trace(airport_operations_model).get_trace(networks)
    storm_probability = trace.nodes["storm_probability"]["value"]
    output_networks = trace.nodes["_RETURN"]["value"]

    outcomes_df = pd.concat(
        [
            network.outcomes_frame().assign(day=day)
            for day, network in enumerate(output_networks)
        ],
        ignore_index=True,
    )

    print(f"Sampled storm probability: {storm_probability.item():.3f}")
    print(outcomes_df.groupby(["action", "succeeded"]).size().to_string())
    print()
    print("Refusals by error:")
    print(outcomes_df["error"].value_counts().to_string())


if __name__ == "__main__":
    main()
