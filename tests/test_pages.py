"""Tests for the Streamlit pages, run headless with Streamlit's AppTest."""

import os
import unittest

from streamlit.testing.v1 import AppTest

from fitness_converter.models import FitnessProfile

PAGES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'pages')
TIMEOUT = 30


def load_page(name: str) -> AppTest:
    return AppTest.from_file(os.path.join(PAGES_DIR, name), default_timeout=TIMEOUT)


class TestBodyPage(unittest.TestCase):
    def test_single_unit_height_shows_feet_and_inches(self):
        at = load_page('2_Body.py').run()
        at.radio(key='height_mode').set_value('Single unit').run()

        self.assertFalse(at.exception)
        captions = [c.value for c in at.caption]
        self.assertIn("That is 5 ft 8 in", captions)


class TestTrainingPage(unittest.TestCase):
    def test_saved_zero_values_are_shown_as_saved(self):
        at = load_page('3_Training.py')
        at.session_state['fitness_profile'] = FitnessProfile(age=0, resting_heart_rate=45)
        at.run()

        self.assertFalse(at.exception)
        self.assertEqual(at.number_input(key='profile_age').value, 0)
        self.assertEqual(at.number_input(key='profile_resting_hr').value, 45)

    def test_empty_profile_uses_defaults(self):
        at = load_page('3_Training.py').run()

        self.assertFalse(at.exception)
        self.assertEqual(at.number_input(key='profile_age').value, 30)
        self.assertEqual(at.number_input(key='profile_resting_hr').value, 60)


if __name__ == "__main__":
    unittest.main()
