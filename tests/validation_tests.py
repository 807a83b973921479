import math
import unittest

from core.errors import InputInvalid
from validation import all_finite, all_positive, check_entry, parse_numeric
from workouts import WorkoutKind


class PredicateTests(unittest.TestCase):
    def test_all_finite(self):
        self.assertTrue(all_finite(5, 25.5, 180))
        self.assertTrue(all_finite(0, -20))
        self.assertFalse(all_finite(5, float('nan'), 180))
        self.assertFalse(all_finite(5, 25, float('inf')))
        self.assertFalse(all_finite(5, "25"))
        self.assertFalse(all_finite(None))
        self.assertFalse(all_finite(True))

    def test_all_positive(self):
        self.assertTrue(all_positive(0.1, 1, 180))
        self.assertFalse(all_positive(5, 0))
        self.assertFalse(all_positive(5, -1))
        self.assertFalse(all_positive(float('nan')))
        self.assertFalse(all_positive("10"))

    def test_empty_input_is_vacuously_true(self):
        self.assertTrue(all_finite())
        self.assertTrue(all_positive())


class ParseNumericTests(unittest.TestCase):
    def test_blank_values_read_as_zero(self):
        self.assertEqual(parse_numeric(None), 0.0)
        self.assertEqual(parse_numeric(""), 0.0)
        self.assertEqual(parse_numeric("   "), 0.0)

    def test_numbers_and_numeric_text(self):
        self.assertEqual(parse_numeric(5), 5.0)
        self.assertEqual(parse_numeric("12.5"), 12.5)
        self.assertEqual(parse_numeric(" -20 "), -20.0)

    def test_garbage_reads_as_nan(self):
        self.assertTrue(math.isnan(parse_numeric("ten")))


class CheckEntryTests(unittest.TestCase):
    def test_running_requires_positive_cadence(self):
        self.assertEqual(check_entry("running", 5, 25, 180), WorkoutKind.RUNNING)
        with self.assertRaises(InputInvalid):
            check_entry("running", 5, 25, 0)
        with self.assertRaises(InputInvalid):
            check_entry("running", 5, 25, -180)

    def test_cycling_allows_zero_or_negative_elevation(self):
        self.assertEqual(check_entry("cycling", 10, 30, 0), WorkoutKind.CYCLING)
        self.assertEqual(check_entry("cycling", 10, 30, -20), WorkoutKind.CYCLING)

    def test_cycling_elevation_must_still_be_finite(self):
        with self.assertRaises(InputInvalid):
            check_entry("cycling", 10, 30, float('nan'))
        with self.assertRaises(InputInvalid):
            check_entry("cycling", 10, 30, float('-inf'))

    def test_cycling_zero_duration_is_rejected(self):
        with self.assertRaises(InputInvalid) as ctx:
            check_entry("cycling", 10, 0, -20)
        self.assertEqual(str(ctx.exception), "Input has to be a positive number")

    def test_non_finite_distance_rejected_for_both_kinds(self):
        for kind in ("running", "cycling"):
            with self.subTest(kind=kind):
                with self.assertRaises(InputInvalid):
                    check_entry(kind, float('inf'), 30, 100)

    def test_running_cadence_must_be_whole(self):
        self.assertEqual(check_entry("running", 5, 25, 180.0), WorkoutKind.RUNNING)
        with self.assertRaises(InputInvalid):
            check_entry("running", 5, 25, 180.5)

    def test_speed_divisor_underflow_rejected(self):
        with self.assertRaises(InputInvalid):
            check_entry("cycling", 10, 5e-324, 0)

    def test_pace_overflow_rejected(self):
        with self.assertRaises(InputInvalid):
            check_entry("running", 1e-300, 1e300, 180)

    def test_speed_overflow_rejected(self):
        with self.assertRaises(InputInvalid):
            check_entry("cycling", 1e308, 1e-300, 0)

    def test_unknown_kind(self):
        with self.assertRaises(InputInvalid):
            check_entry("rowing", 5, 25, 10)

    def test_input_invalid_is_a_value_error(self):
        self.assertTrue(issubclass(InputInvalid, ValueError))


if __name__ == "__main__":
    unittest.main()
