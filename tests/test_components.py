"""Tests for the Streamlit page components that need no running app."""

import unittest

import pandas as pd
import plotly.graph_objects as go

from fitness_converter.metrics import calculate_heart_rate_zones
from fitness_converter.units import HeightUnit
from pages.components.charts import create_bmi_gauge, create_heart_rate_zone_chart, zones_to_dataframe
from pages.components.unit_converter import ft_in_to_height, height_to_ft_in


class TestUnitConverter(unittest.TestCase):
    def test_ft_in_to_height(self):
        self.assertEqual(ft_in_to_height(5, 8), 68)
        self.assertAlmostEqual(ft_in_to_height(5, 8, HeightUnit.CENTIMETERS), 172.72)

    def test_height_to_ft_in(self):
        self.assertEqual(height_to_ft_in(68), (5, 8))
        self.assertEqual(height_to_ft_in(172.72, HeightUnit.CENTIMETERS), (5, 8))
        # 71.8 inches rounds up to a whole six feet
        self.assertEqual(height_to_ft_in(71.8), (6, 0))


class TestCharts(unittest.TestCase):
    def setUp(self):
        self.zones = calculate_heart_rate_zones(age=30, resting_heart_rate=60)

    def test_zones_to_dataframe(self):
        df = zones_to_dataframe(self.zones)
        self.assertIsInstance(df, pd.DataFrame)
        self.assertEqual(list(df.columns), ['Zone', 'Min BPM', 'Max BPM', 'Range'])
        self.assertEqual(len(df), 7)
        self.assertEqual(df['Max BPM'].iloc[-1], 190)
        self.assertTrue((df['Range'] >= 0).all())

    def test_zone_chart(self):
        fig = create_heart_rate_zone_chart(self.zones)
        self.assertIsInstance(fig, go.Figure)
        self.assertEqual(fig.layout.title.text, 'Heart Rate Training Zones')

    def test_zone_chart_without_zones(self):
        fig = create_heart_rate_zone_chart([])
        self.assertEqual(len(fig.data), 0)
        self.assertEqual(fig.layout.annotations[0].text, "No heart rate zones to show")

    def test_bmi_gauge(self):
        fig = create_bmi_gauge(22.8)
        self.assertEqual(fig.data[0].value, 22.8)
        self.assertIn("Normal weight", fig.data[0].title.text)


if __name__ == "__main__":
    unittest.main()
