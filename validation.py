"""Numeric checks applied to workout form submissions."""

from __future__ import annotations

import math
from numbers import Real

from constants import UI_COPY
from core.errors import InputInvalid
from workouts import WorkoutKind


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def all_finite(*inputs) -> bool:
    """True if every input is a finite real number."""
    return all(_is_number(value) and math.isfinite(value) for value in inputs)


def all_positive(*inputs) -> bool:
    """True if every input is strictly greater than zero."""
    return all(_is_number(value) and value > 0 for value in inputs)


def parse_numeric(raw) -> float:
    """
    Coerce a raw form value into a float.

    Blank or missing values read as 0.0 and anything unparseable reads as NaN,
    so both fall through to the positivity/finiteness checks instead of
    raising here.
    """
    if raw is None:
        return 0.0
    if _is_number(raw):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return float('nan')


def _metric_is_computable(kind, distance, duration) -> bool:
    """False when pace/speed would divide by an underflowed zero or overflow to inf."""
    if kind == WorkoutKind.RUNNING:
        return math.isfinite(duration / distance)
    hours = duration / 60
    if hours == 0:
        return False
    return math.isfinite(distance / hours)


def check_entry(kind, distance, duration, extra) -> WorkoutKind:
    """
    Apply the per-kind acceptance rule and return the parsed kind.

    Running: distance, duration and cadence must all be finite and positive,
    and cadence must be a whole number of steps per minute.
    Cycling: distance, duration and elevation must be finite, but only
    distance and duration must be positive (elevation may be a descent).
    Either way the derived pace or speed must come out finite.

    Raises InputInvalid on any failure.
    """
    try:
        kind = WorkoutKind(kind)
    except ValueError:
        raise InputInvalid(f"Unknown workout type: {kind!r}") from None

    if kind == WorkoutKind.RUNNING:
        valid = (
            all_finite(distance, duration, extra)
            and all_positive(distance, duration, extra)
            and float(extra).is_integer()
        )
    else:
        valid = all_finite(distance, duration, extra) and all_positive(distance, duration)

    if not valid or not _metric_is_computable(kind, distance, duration):
        raise InputInvalid(UI_COPY['invalid_input'])
    return kind
