import unittest

import pyro
import pyro.poutine as poutine
import torch

from airport_sim.types import Weather
from airport_sim.weather import (
    DEFAULT_STORM_PROBABILITY,
    FixedWeather,
    WeatherSystem,
)


class TestWeatherSystem(unittest.TestCase):
    def setUp(self):
        pyro.set_rng_seed(0)

    def test_check_returns_label(self):
        weather = WeatherSystem()
        for _ in range(10):
            self.assertIn(weather.check(), (Weather.SUNSHINE, Weather.STORMY))

    def test_both_labels_occur(self):
        weather = WeatherSystem()
        observed = {weather.check() for _ in range(200)}
        self.assertEqual(observed, {Weather.SUNSHINE, Weather.STORMY})

    def test_default_storm_probability(self):
        self.assertEqual(DEFAULT_STORM_PROBABILITY, 0.5)
        self.assertEqual(float(WeatherSystem().storm_probability), 0.5)

    def test_labels_equally_likely(self):
        weather = WeatherSystem()
        num_checks = 2000
        num_stormy = sum(weather.check() == Weather.STORMY for _ in range(num_checks))
        self.assertGreaterEqual(num_stormy / num_checks, 0.45)
        self.assertLessEqual(num_stormy / num_checks, 0.55)

    def test_certain_weather(self):
        self.assertEqual(WeatherSystem(0.0).check(), Weather.SUNSHINE)
        self.assertEqual(WeatherSystem(1.0).check(), Weather.STORMY)

    def test_invalid_probability(self):
        with self.assertRaises(ValueError):
            WeatherSystem(1.5)
        with self.assertRaises(ValueError):
            WeatherSystem(-0.1)

    def test_sample_sites(self):
        weather = WeatherSystem(var_prefix="LHR_")
        trace = poutine.trace(lambda: [weather.check() for _ in range(3)]).get_trace()
        self.assertIn("LHR_weather_0", trace.nodes)
        self.assertIn("LHR_weather_2", trace.nodes)
        self.assertEqual(weather.num_checks, 3)

    def test_condition_weather(self):
        weather = WeatherSystem(var_prefix="LHR_")
        conditioned_check = poutine.condition(
            weather.check,
            data={"LHR_weather_0": torch.tensor(1.0)},
        )
        self.assertEqual(conditioned_check(), Weather.STORMY)


class TestFixedWeather(unittest.TestCase):
    def test_forecast_in_order(self):
        weather = FixedWeather(Weather.SUNSHINE, Weather.STORMY)
        self.assertEqual(weather.check(), Weather.SUNSHINE)
        self.assertEqual(weather.check(), Weather.STORMY)
        # The last entry repeats
        self.assertEqual(weather.check(), Weather.STORMY)

    def test_empty_forecast(self):
        with self.assertRaises(ValueError):
            FixedWeather()


if __name__ == "__main__":
    unittest.main()
