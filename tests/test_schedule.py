import unittest

import pandas as pd

from airport_sim.schedule import parse_movement, parse_schedule
from airport_sim.types import DEFAULT_CAPACITY, Movement, MovementAction


class TestMovementParsing(unittest.TestCase):
    def test_parse_movement(self):
        schedule_row = pd.Series(
            {"tail_number": "G-ABCD", "airport": "LHR", "action": "take_off"}
        )

        expected_movement = Movement(
            tail_number="G-ABCD",
            airport_code="LHR",
            action=MovementAction.TAKE_OFF,
        )

        result_movement = parse_movement(schedule_row)
        self.assertEqual(result_movement, expected_movement)

    def test_parse_movement_unknown_action(self):
        schedule_row = {"tail_number": "G-ABCD", "airport": "LHR", "action": "taxi"}
        with self.assertRaisesRegex(ValueError, "taxi"):
            parse_movement(schedule_row)

    def test_parse_schedule(self):
        schedule_data = {
            "tail_number": ["G-ABCD", "G-ABCD", "N123", "G-ABCD"],
            "airport": ["LHR", "LHR", "JFK", "LHR"],
            "action": ["land", "take_off", "land", "confirm_take_off"],
        }

        schedule_df = pd.DataFrame(schedule_data)
        expected_movements = [
            Movement("G-ABCD", "LHR", MovementAction.LAND),
            Movement("G-ABCD", "LHR", MovementAction.TAKE_OFF),
            Movement("N123", "JFK", MovementAction.LAND),
            Movement("G-ABCD", "LHR", MovementAction.CONFIRM_TAKE_OFF),
        ]

        movements, airports, planes = parse_schedule(schedule_df, capacities={"JFK": 3})
        self.assertEqual(movements, expected_movements)
        self.assertEqual([airport.code for airport in airports], ["LHR", "JFK"])
        self.assertEqual(
            [airport.capacity for airport in airports], [DEFAULT_CAPACITY, 3]
        )
        self.assertEqual([plane.tail_number for plane in planes], ["G-ABCD", "N123"])
        self.assertTrue(all(airport.hangar == [] for airport in airports))


if __name__ == "__main__":
    unittest.main()
