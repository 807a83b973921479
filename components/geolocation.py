"""
components/geolocation.py
─────────────────────────
Browser position lookup for the controller's one-time startup step.

Results are delivered through the success/failure callbacks; nothing awaits
the request itself.
"""
from __future__ import annotations

import logging

from nicegui import ui

from constants import GEOLOCATION_TIMEOUT_SEC, UI_COPY
from core.errors import GeolocationUnavailable


logger = logging.getLogger(__name__)

# Resolves (never rejects) so failures arrive as {error: ...} payloads.
GET_POSITION_JS = """
new Promise((resolve) => {
    if (!navigator.geolocation) {
        resolve({error: 'Geolocation is not supported by this browser'});
        return;
    }
    navigator.geolocation.getCurrentPosition(
        (pos) => resolve({latitude: pos.coords.latitude, longitude: pos.coords.longitude}),
        (err) => resolve({error: err.message || 'Position unavailable'}),
    );
})
"""


class BrowserGeolocation:
    """Asks the connected browser for its current position via navigator.geolocation."""

    def __init__(self, timeout: float = GEOLOCATION_TIMEOUT_SEC):
        self.timeout = timeout

    def request_current_position(self, on_success, on_failure) -> None:
        # Timer callbacks run in the page's slot context once the client connects.
        ui.timer(0, lambda: self._request(on_success, on_failure), once=True)

    async def _request(self, on_success, on_failure) -> None:
        try:
            result = await ui.run_javascript(GET_POSITION_JS, timeout=self.timeout)
        except TimeoutError:
            logger.warning("Position request timed out after %.0fs", self.timeout)
            on_failure(GeolocationUnavailable(f"{UI_COPY['geolocation_failed']} (timed out)"))
            return

        if not isinstance(result, dict):
            on_failure(GeolocationUnavailable(UI_COPY['geolocation_failed']))
            return
        if result.get('error'):
            on_failure(GeolocationUnavailable(result['error']))
            return
        on_success(result)
