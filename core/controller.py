"""
core/controller.py
──────────────────
Workout entry pipeline: map click → form → validate → create → store → render.

Owns:
  • The IDLE / FORM_OPEN state machine and the pending click location
  • One-time position lookup and map view creation
  • Appending to the session WorkoutCollection and invoking both renderers

Does not own:
  • Widgets (form, list, map and geolocation surfaces are injected)
  • Notification display (injected `notify` callable)
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from constants import MAP_ZOOM_LEVEL, UI_COPY
from core.errors import InputInvalid, MalformedPosition
from core.renderers import render_workout_entry, render_workout_marker
from state import AppState, ControllerPhase
from validation import check_entry, parse_numeric
from workouts import Coordinates, Workout, WorkoutKind, create_workout


logger = logging.getLogger(__name__)


def coordinates_from_position(position) -> Coordinates:
    """
    Normalize a position payload into Coordinates.

    Accepts a mapping with latitude/longitude (optionally nested under
    'coords', as the browser reports it) or a (lat, lon) pair.
    Raises MalformedPosition when the values are missing or out of range.
    """
    if isinstance(position, dict):
        coords = position.get('coords', position)
        if not isinstance(coords, dict):
            raise MalformedPosition(f"Position has no coordinates: {position!r}")
        lat, lon = coords.get('latitude'), coords.get('longitude')
    elif isinstance(position, (list, tuple)) and len(position) == 2:
        lat, lon = position
    else:
        raise MalformedPosition(f"Unrecognized position payload: {position!r}")

    try:
        lat = float(lat)
        lon = float(lon)
    except (TypeError, ValueError):
        raise MalformedPosition(f"Non-numeric coordinates: {lat!r}, {lon!r}") from None

    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise MalformedPosition(f"Non-finite coordinates: {lat}, {lon}")
    if not (-90 <= lat <= 90 and -180 <= lon <= 180):
        raise MalformedPosition(f"Coordinates out of range: {lat}, {lon}")
    return Coordinates(lat, lon)


class WorkoutController:
    """Coordinates the form, map and list surfaces around the session's workouts."""

    def __init__(
        self,
        *,
        geolocation,
        map_factory,
        form,
        workout_list,
        notify,
        state: Optional[AppState] = None,
        callbacks=None,
    ):
        self.geolocation = geolocation
        self.map_factory = map_factory
        self.form = form
        self.workout_list = workout_list
        self.notify = notify
        self.state = state or AppState()
        self.callbacks = callbacks or {}

    def _invoke_callback(self, name, *args, **kwargs):
        cb = self.callbacks.get(name)
        if not callable(cb):
            return None
        return cb(*args, **kwargs)

    # ── Startup ──────────────────────────────────────────────────────────

    def start(self) -> None:
        """Subscribe to form events and request the current position once."""
        self.form.on_submit(self.handle_submit)
        self.form.on_type_change(self.handle_type_change)
        self.geolocation.request_current_position(self._load_map, self._position_failed)

    def _load_map(self, position) -> None:
        try:
            center = coordinates_from_position(position)
        except MalformedPosition as exc:
            self._position_failed(exc)
            return

        map_view = self.map_factory(center, MAP_ZOOM_LEVEL)
        map_view.on_click(self.handle_map_click)
        self.state.map_view = map_view
        logger.info("Map ready at %.5f, %.5f", center.latitude, center.longitude)

    def _position_failed(self, error) -> None:
        message = str(error or '') or UI_COPY['geolocation_failed']
        self.state.geolocation_error = message
        if isinstance(error, MalformedPosition):
            logger.warning("Position rejected: %s", message)
        else:
            logger.warning("Geolocation unavailable: %s", message)
        self.notify(message, type='warning')

    # ── Events ───────────────────────────────────────────────────────────

    def handle_map_click(self, location) -> None:
        self.state.pending_location = Coordinates(*location)
        self.state.phase = ControllerPhase.FORM_OPEN
        self.form.show()
        self.form.focus_distance_field()

    def handle_type_change(self, kind=None) -> None:
        self.form.toggle_extra_field()

    def handle_submit(self, raw_inputs) -> Optional[Workout]:
        """
        Validate a submission and, if it passes, log and render the workout.

        Returns the new Workout, or None when the submission is rejected. A
        rejected submission leaves the form open with its values intact.
        """
        if self.state.pending_location is None:
            logger.warning("Submit ignored: no map location selected")
            return None

        raw_kind = raw_inputs.get('type')
        distance = parse_numeric(raw_inputs.get('distance'))
        duration = parse_numeric(raw_inputs.get('duration'))
        extra_field = 'cadence' if raw_kind == WorkoutKind.RUNNING.value else 'elevation'
        extra = parse_numeric(raw_inputs.get(extra_field))

        try:
            kind = check_entry(raw_kind, distance, duration, extra)
        except InputInvalid as exc:
            logger.info("Rejected %s entry: %s", raw_kind, exc)
            self.notify(str(exc), type='warning')
            return None

        workout = create_workout(kind, self.state.pending_location, distance, duration, extra)
        self.state.workouts.add(workout)

        render_workout_marker(self.state.map_view, workout)
        render_workout_entry(self.workout_list, workout)

        self.form.hide()
        self.form.clear()
        self.state.pending_location = None
        self.state.phase = ControllerPhase.IDLE

        self._invoke_callback('on_workout_logged', workout)
        return workout
