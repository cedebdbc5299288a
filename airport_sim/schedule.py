"""Define methods for working with movement schedules."""
from typing import Optional

import pandas as pd

from airport_sim.types import (
    DEFAULT_CAPACITY,
    Airport,
    AirportCode,
    Movement,
    MovementAction,
    Plane,
)


def parse_movement(schedule_row) -> Movement:
    """
    Parse a row of the schedule into a Movement object.

    Args:
        schedule_row: a mapping (e.g. a pandas Series) with the following items
            - tail_number
            - airport
            - action, one of "land", "take_off" or "confirm_take_off"
    """
    action = str(schedule_row["action"]).strip().lower()
    try:
        movement_action = MovementAction(action)
    except ValueError:
        raise ValueError(f"Unknown movement action: {schedule_row['action']!r}")

    return Movement(
        tail_number=str(schedule_row["tail_number"]),
        airport_code=str(schedule_row["airport"]),
        action=movement_action,
    )


def parse_schedule(
    schedule_df: pd.DataFrame, capacities: Optional[dict[AirportCode, int]] = None
) -> tuple[list[Movement], list[Airport], list[Plane]]:
    """Parse a pandas dataframe for a schedule into a list of pending movements.

    Args:
        schedule_df: A pandas dataframe with the following columns:
            tail_number: The tail number of the plane
            airport: The code of the airport handling the movement
            action: The requested movement
        capacities: Optional hangar capacities by airport code. Airports not
            listed get the default capacity.

    Returns:
        a list of movements, in schedule order,
        a list of airports, and
        a list of planes
    """
    if capacities is None:
        capacities = {}

    # Get a list of movements
    movements = [parse_movement(row) for _, row in schedule_df.iterrows()]

    # Create an airport object for each airport code, in order of first appearance
    airport_codes = [str(code) for code in schedule_df["airport"].unique()]
    airports = [
        Airport(capacity=capacities.get(code, DEFAULT_CAPACITY), code=code)
        for code in airport_codes
    ]

    # Create a plane object for each tail number; every plane starts in flight
    tail_numbers = [str(tail) for tail in schedule_df["tail_number"].unique()]
    planes = [Plane(tail_number=tail_number) for tail_number in tail_numbers]

    return movements, airports, planes
