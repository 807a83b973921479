import dataclasses
import unittest
from datetime import datetime

from workouts import (
    Coordinates,
    CyclingStats,
    RunningStats,
    Workout,
    WorkoutKind,
    calc_pace,
    calc_speed,
    create_cycling,
    create_running,
    create_workout,
    describe_workout,
)


APRIL_14 = datetime(2026, 4, 14, 7, 30)


class RunningWorkoutTests(unittest.TestCase):
    def test_pace_is_duration_over_distance_rounded(self):
        run = create_running((40.0, -75.0), 5, 25, 180, created_at=APRIL_14)

        self.assertEqual(run.kind, WorkoutKind.RUNNING)
        self.assertEqual(run.stats.pace_min_per_km, 5)
        self.assertEqual(run.stats.cadence_spm, 180)
        self.assertEqual(run.coordinates, Coordinates(40.0, -75.0))

    def test_pace_rounds_half_up(self):
        # 22.5 / 5 = 4.5 -> 5, 22 / 5 = 4.4 -> 4
        self.assertEqual(calc_pace(5, 22.5), 5)
        self.assertEqual(calc_pace(5, 22), 4)
        self.assertIsInstance(calc_pace(3, 20), int)

    def test_description(self):
        run = create_running((40.0, -75.0), 5, 25, 180, created_at=APRIL_14)
        self.assertEqual(run.description, "Running on April 14")

    def test_created_at_defaults_to_now(self):
        before = datetime.now()
        run = create_running((0.0, 0.0), 1, 6, 170)
        after = datetime.now()
        self.assertTrue(before <= run.created_at <= after)
        self.assertIn("Running", run.description)


class CyclingWorkoutTests(unittest.TestCase):
    def test_speed_uses_duration_as_time_basis(self):
        # The legacy formula distance / (distance / 60) always gave 60.
        # Speed here is distance / (duration / 60): 20 km in 40 min -> 30 km/h.
        ride = create_cycling((40.0, -75.0), 20, 40, 150, created_at=APRIL_14)
        self.assertEqual(ride.stats.speed_km_per_h, 30)
        self.assertNotEqual(calc_speed(20, 40), 60)

    def test_speed_changes_with_duration(self):
        self.assertEqual(calc_speed(30, 60), 30)
        self.assertEqual(calc_speed(30, 90), 20)

    def test_negative_elevation_is_kept(self):
        ride = create_cycling((46.5, 7.9), 25, 50, -300, created_at=APRIL_14)
        self.assertEqual(ride.stats.elevation_gain_m, -300)
        self.assertEqual(ride.description, "Cycling on April 14")


class WorkoutRecordTests(unittest.TestCase):
    def test_records_are_immutable(self):
        run = create_running((40.0, -75.0), 5, 25, 180)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            run.distance_km = 10
        with self.assertRaises(dataclasses.FrozenInstanceError):
            run.stats.pace_min_per_km = 1

    def test_ids_are_unique(self):
        ids = {create_running((0.0, 0.0), 5, 25, 180).id for _ in range(200)}
        self.assertEqual(len(ids), 200)

    def test_kind_must_match_stats(self):
        with self.assertRaises(TypeError):
            Workout(
                id="abc",
                created_at=APRIL_14,
                coordinates=Coordinates(0.0, 0.0),
                distance_km=5,
                duration_min=25,
                kind=WorkoutKind.CYCLING,
                stats=RunningStats(cadence_spm=180, pace_min_per_km=5),
                description="Cycling on April 14",
            )

    def test_create_workout_dispatches_on_kind(self):
        run = create_workout("running", (1.0, 2.0), 10, 50, 175)
        ride = create_workout(WorkoutKind.CYCLING, (1.0, 2.0), 10, 20, 80)

        self.assertIsInstance(run.stats, RunningStats)
        self.assertIsInstance(ride.stats, CyclingStats)
        self.assertEqual(ride.stats.speed_km_per_h, 30)

    def test_create_workout_rejects_unknown_kind(self):
        with self.assertRaises(ValueError):
            create_workout("swimming", (1.0, 2.0), 1, 30, 0)

    def test_description_covers_every_month(self):
        self.assertEqual(describe_workout("cycling", datetime(2026, 1, 1)), "Cycling on January 1")
        self.assertEqual(describe_workout("running", datetime(2026, 12, 31)), "Running on December 31")


if __name__ == "__main__":
    unittest.main()
