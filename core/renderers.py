"""
core/renderers.py
─────────────────
Project a Workout into its two visual forms: a map marker with popup and a
list entry. Framework-free; the map view and list surface are injected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from constants import DETAIL_ICONS, POPUP_OPTIONS, WORKOUT_ICONS
from workouts import Workout, WorkoutKind


@dataclass(frozen=True)
class EntryDetail:
    icon: str
    value: str
    unit: str


@dataclass(frozen=True)
class WorkoutEntry:
    """Structured content of one list entry."""

    workout_id: str
    kind: str
    title: str
    details: Tuple[EntryDetail, ...]


def _format_number(value) -> str:
    """Drop a trailing .0 so 5.0 km reads as 5 km."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def popup_content(workout: Workout) -> str:
    return f"{WORKOUT_ICONS[workout.kind.value]} {workout.description}"


def popup_options(workout: Workout) -> dict:
    options = dict(POPUP_OPTIONS)
    options['className'] = f"{workout.kind.value}-popup"
    return options


def render_workout_marker(map_view, workout: Workout) -> None:
    """Place a marker with an open popup at the workout's coordinates."""
    map_view.place_marker(workout.coordinates, popup_content(workout), popup_options(workout))


def build_workout_entry(workout: Workout) -> WorkoutEntry:
    details = [
        EntryDetail(WORKOUT_ICONS[workout.kind.value], _format_number(workout.distance_km), 'km'),
        EntryDetail(DETAIL_ICONS['duration'], _format_number(workout.duration_min), 'min'),
    ]
    if workout.kind == WorkoutKind.RUNNING:
        details.append(EntryDetail(DETAIL_ICONS['pace'], str(workout.stats.pace_min_per_km), 'min/km'))
        details.append(EntryDetail(DETAIL_ICONS['cadence'], _format_number(workout.stats.cadence_spm), 'spm'))
    else:
        details.append(EntryDetail(DETAIL_ICONS['speed'], str(workout.stats.speed_km_per_h), 'km/h'))
        details.append(EntryDetail(DETAIL_ICONS['elevation'], _format_number(workout.stats.elevation_gain_m), 'm'))

    return WorkoutEntry(
        workout_id=workout.id,
        kind=workout.kind.value,
        title=workout.description,
        details=tuple(details),
    )


def render_workout_entry(workout_list, workout: Workout) -> WorkoutEntry:
    """Append one entry for `workout` after the form. No deduplication."""
    entry = build_workout_entry(workout)
    workout_list.append_entry_after_form(entry)
    return entry
