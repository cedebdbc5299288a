"""Test the airport_sim.types.plane module."""
import unittest

from airport_sim.types import Plane, PlaneStatus


class TestPlane(unittest.TestCase):
    def test_new_plane_is_in_flight(self):
        plane = Plane()
        self.assertEqual(plane.status, PlaneStatus.IN_FLIGHT)
        self.assertIsNone(plane.location)
        self.assertFalse(plane.landed)

    def test_tail_numbers_are_unique(self):
        self.assertNotEqual(Plane().tail_number, Plane().tail_number)

    def test_str(self):
        self.assertEqual(str(Plane(tail_number="G-ABCD")), "G-ABCD")

    def test_identity(self):
        # Two planes with the same registration are still different planes
        self.assertNotEqual(Plane(tail_number="G-ABCD"), Plane(tail_number="G-ABCD"))
        self.assertNotIn(Plane(tail_number="G-ABCD"), [Plane(tail_number="G-ABCD")])


if __name__ == "__main__":
    unittest.main()
