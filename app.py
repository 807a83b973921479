"""
Workout Map
"""

# Standard library imports
import logging

# Third-party imports
from nicegui import ui

# Local imports
from constants import RUN_OPTIONS
from state import AppState
from core.controller import WorkoutController
from components.geolocation import BrowserGeolocation
from components.layout import AppShell
from components.map_view import LeafletMapView
from components.workout_form import WorkoutForm
from components.workout_list import WorkoutList


logger = logging.getLogger(__name__)


class MuteFrameworkNoise(logging.Filter):
    def filter(self, record):
        # Filter out the specific NiceGUI warning about event listeners
        return "Event listeners changed after initial definition" not in record.getMessage()


# --- MAIN APPLICATION CLASS ---
class WorkoutMapApp:
    """One browser session: shell, surfaces, and the workout controller."""

    def __init__(self):
        self.state = AppState()

        self.form = WorkoutForm()
        self.workout_list = WorkoutList()
        self.layout = AppShell(form=self.form, workout_list=self.workout_list).build()
        self.layout.update_summary(self.state.workouts.summarize())

        self.controller = WorkoutController(
            geolocation=BrowserGeolocation(),
            map_factory=LeafletMapView.factory(self.layout.map_container),
            form=self.form,
            workout_list=self.workout_list,
            notify=ui.notify,
            state=self.state,
            callbacks={'on_workout_logged': self.on_workout_logged},
        )
        self.controller.start()

    def on_workout_logged(self, workout):
        """Refresh session totals after each successful entry."""
        logger.info("Session now has %d workout(s)", len(self.state.workouts))
        self.layout.update_summary(self.state.workouts.summarize())
        ui.notify(f"Logged: {workout.description}", type='positive')


@ui.page('/')
def index():
    WorkoutMapApp()


def main():
    """Application entry point."""
    # Suppress known NiceGUI framework listener-churn warning noise
    nicegui_logger = logging.getLogger('nicegui')
    nicegui_logger.addFilter(MuteFrameworkNoise())

    try:
        ui.run(**RUN_OPTIONS)
    except KeyboardInterrupt:
        # Graceful terminal interrupt during local development.
        pass
    except RuntimeError as e:
        msg = str(e)
        if 'Cannot close a running event loop' in msg or 'this event loop is already running' in msg:
            # uvloop teardown can surface this after Ctrl+C; treat as graceful exit.
            pass
        else:
            raise


if __name__ in {"__main__", "__mp_main__"}:
    main()
