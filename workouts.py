"""Workout records: running and cycling variants with derived metrics."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NamedTuple, Optional, Union

from constants import MONTH_NAMES


class WorkoutKind(str, Enum):
    RUNNING = "running"
    CYCLING = "cycling"


class Coordinates(NamedTuple):
    latitude: float
    longitude: float


@dataclass(frozen=True)
class RunningStats:
    cadence_spm: int
    pace_min_per_km: int


@dataclass(frozen=True)
class CyclingStats:
    elevation_gain_m: float
    speed_km_per_h: int


@dataclass(frozen=True)
class Workout:
    """
    One logged exercise session.

    `kind` is the discriminant; `stats` carries the kind-specific payload
    (RunningStats for running, CyclingStats for cycling). Every field is
    fixed at construction.
    """

    id: str
    created_at: datetime
    coordinates: Coordinates
    distance_km: float
    duration_min: float
    kind: WorkoutKind
    stats: Union[RunningStats, CyclingStats]
    description: str

    def __post_init__(self):
        expected = RunningStats if self.kind == WorkoutKind.RUNNING else CyclingStats
        if not isinstance(self.stats, expected):
            raise TypeError(
                f"{self.kind.value} workout requires {expected.__name__}, got {type(self.stats).__name__}"
            )


def _round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest whole number, .5 going up."""
    return int(math.floor(value + 0.5))


def _new_workout_id() -> str:
    return uuid.uuid4().hex


def describe_workout(kind, created_at: datetime) -> str:
    """Return e.g. 'Running on April 14'."""
    name = WorkoutKind(kind).value
    return f"{name[0].upper()}{name[1:]} on {MONTH_NAMES[created_at.month - 1]} {created_at.day}"


def calc_pace(distance_km: float, duration_min: float) -> int:
    """Minutes per kilometre, rounded."""
    return _round_half_up(duration_min / distance_km)


def calc_speed(distance_km: float, duration_min: float) -> int:
    """Kilometres per hour, rounded. Duration is the time basis."""
    return _round_half_up(distance_km / (duration_min / 60))


def create_running(
    coordinates,
    distance_km: float,
    duration_min: float,
    cadence_spm: float,
    *,
    created_at: Optional[datetime] = None,
) -> Workout:
    created_at = created_at or datetime.now()
    return Workout(
        id=_new_workout_id(),
        created_at=created_at,
        coordinates=Coordinates(*coordinates),
        distance_km=distance_km,
        duration_min=duration_min,
        kind=WorkoutKind.RUNNING,
        stats=RunningStats(
            cadence_spm=int(cadence_spm),
            pace_min_per_km=calc_pace(distance_km, duration_min),
        ),
        description=describe_workout(WorkoutKind.RUNNING, created_at),
    )


def create_cycling(
    coordinates,
    distance_km: float,
    duration_min: float,
    elevation_gain_m: float,
    *,
    created_at: Optional[datetime] = None,
) -> Workout:
    created_at = created_at or datetime.now()
    return Workout(
        id=_new_workout_id(),
        created_at=created_at,
        coordinates=Coordinates(*coordinates),
        distance_km=distance_km,
        duration_min=duration_min,
        kind=WorkoutKind.CYCLING,
        stats=CyclingStats(
            elevation_gain_m=elevation_gain_m,
            speed_km_per_h=calc_speed(distance_km, duration_min),
        ),
        description=describe_workout(WorkoutKind.CYCLING, created_at),
    )


def create_workout(kind, coordinates, distance_km, duration_min, extra, *, created_at=None) -> Workout:
    """Build the record for `kind`; `extra` is cadence for running, elevation gain for cycling."""
    kind = WorkoutKind(kind)
    if kind == WorkoutKind.RUNNING:
        return create_running(coordinates, distance_km, duration_min, extra, created_at=created_at)
    return create_cycling(coordinates, distance_km, duration_min, extra, created_at=created_at)
