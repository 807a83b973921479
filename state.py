"""Session state owned by the workout controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from core.workout_log import WorkoutCollection
from workouts import Coordinates


class ControllerPhase(str, Enum):
    IDLE = "idle"
    FORM_OPEN = "form_open"


@dataclass
class AppState:
    """
    Mutable state for one session.

    map_view is set once when the position resolves; pending_location is
    overwritten by each map click and consumed by the next successful submit.
    """

    workouts: WorkoutCollection = field(default_factory=WorkoutCollection)
    map_view: Optional[Any] = None
    pending_location: Optional[Coordinates] = None
    phase: ControllerPhase = ControllerPhase.IDLE
    geolocation_error: Optional[str] = None

    @property
    def map_ready(self) -> bool:
        return self.map_view is not None
