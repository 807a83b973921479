"""Session-scoped workout collection and its summary views."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

import pandas as pd

from workouts import Workout, WorkoutKind


logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ['kind', 'count', 'distance_km', 'duration_min']


class WorkoutCollection:
    """Append-only, insertion-ordered set of workouts keyed by id."""

    def __init__(self):
        self._workouts: List[Workout] = []
        self._by_id: Dict[str, Workout] = {}

    def add(self, workout: Workout) -> Workout:
        if workout.id in self._by_id:
            raise ValueError(f"Workout id already logged: {workout.id}")
        self._workouts.append(workout)
        self._by_id[workout.id] = workout
        logger.debug("Logged %s workout %s (%d total)", workout.kind.value, workout.id, len(self._workouts))
        return workout

    def get(self, workout_id: str) -> Optional[Workout]:
        return self._by_id.get(workout_id)

    def __contains__(self, workout_id) -> bool:
        return workout_id in self._by_id

    def __iter__(self) -> Iterator[Workout]:
        return iter(tuple(self._workouts))

    def __len__(self) -> int:
        return len(self._workouts)

    def to_records(self) -> List[dict]:
        """Flatten each workout into a plain dict, one per row."""
        rows = []
        for workout in self._workouts:
            row = {
                'id': workout.id,
                'kind': workout.kind.value,
                'created_at': workout.created_at,
                'description': workout.description,
                'latitude': workout.coordinates.latitude,
                'longitude': workout.coordinates.longitude,
                'distance_km': workout.distance_km,
                'duration_min': workout.duration_min,
                'cadence_spm': None,
                'pace_min_per_km': None,
                'elevation_gain_m': None,
                'speed_km_per_h': None,
            }
            if workout.kind == WorkoutKind.RUNNING:
                row['cadence_spm'] = workout.stats.cadence_spm
                row['pace_min_per_km'] = workout.stats.pace_min_per_km
            else:
                row['elevation_gain_m'] = workout.stats.elevation_gain_m
                row['speed_km_per_h'] = workout.stats.speed_km_per_h
            rows.append(row)
        return rows

    def to_dataframe(self) -> Optional[pd.DataFrame]:
        """Return the session as a DataFrame, or None when nothing is logged."""
        rows = self.to_records()
        if not rows:
            return None
        return pd.DataFrame(rows)

    def summarize(self) -> pd.DataFrame:
        """Per-kind totals: count, distance and duration. Kinds with no entries are omitted."""
        df = self.to_dataframe()
        if df is None:
            return pd.DataFrame(columns=SUMMARY_COLUMNS)
        summary = (
            df.groupby('kind', sort=False)
            .agg(
                count=('id', 'size'),
                distance_km=('distance_km', 'sum'),
                duration_min=('duration_min', 'sum'),
            )
            .reset_index()
        )
        return summary[SUMMARY_COLUMNS]
