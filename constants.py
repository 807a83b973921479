"""Shared labels, icons, map defaults, and run options for Workout Map."""

from __future__ import annotations

from typing import Dict, Tuple

# Indexed by zero-based month.
MONTH_NAMES: Tuple[str, ...] = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)


WORKOUT_KIND_OPTIONS: Dict[str, str] = {
    'running': 'Running',
    'cycling': 'Cycling',
}

WORKOUT_ICONS: Dict[str, str] = {
    'running': '🏃',
    'cycling': '🚴‍♀️',
}

DETAIL_ICONS: Dict[str, str] = {
    'duration': '⏱',
    'pace': '⚡️',
    'speed': '⚡️',
    'cadence': '🦶🏼',
    'elevation': '⛰',
}

WORKOUT_ACCENT_COLORS: Dict[str, str] = {
    'running': '#00c46a',  # Green
    'cycling': '#ffb545',  # Amber
}

# --- Map ---
MAP_ZOOM_LEVEL = 13
MAP_TILE_URL = 'https://tile.openstreetmap.org/{z}/{x}/{y}.png'
MAP_TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)

POPUP_OPTIONS = {
    'maxWidth': 250,
    'minWidth': 100,
    'autoClose': False,
    'closeOnClick': False,
}

GEOLOCATION_TIMEOUT_SEC = 30.0

UI_COPY = {
    'invalid_input': 'Input has to be a positive number',
    'geolocation_failed': 'Could not get your position',
    'map_hint': 'Click on the map to log a workout',
    'empty_log': 'No workouts logged yet.',
    'sidebar_title': 'WORKOUT MAP',
    'summary_title': 'THIS SESSION',
}

# --- ui.run ---
RUN_OPTIONS = {
    'native': True,
    'window_size': (1200, 900),
    'title': 'Workout Map',
    'reload': False,
    'dark': True,
}
