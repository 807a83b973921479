"""
components/workout_form.py
──────────────────────────
Entry form for a new workout. Hidden until the map is clicked.

Exposes raw field values and submit/type-change subscriptions; it does not
validate or parse anything itself.
"""
from __future__ import annotations

from nicegui import ui

from constants import WORKOUT_KIND_OPTIONS


class WorkoutForm:
    """NiceGUI form surface: type, distance, duration, cadence / elevation."""

    def __init__(self):
        self._submit_handlers = []
        self._type_handlers = []

        self.card = None
        self.type_select = None
        self.distance_input = None
        self.duration_input = None
        self.cadence_input = None
        self.elevation_input = None
        self.cadence_row = None
        self.elevation_row = None

    def build(self):
        self.card = ui.card().classes('w-full p-4 bg-zinc-800 border border-zinc-700 no-shadow')
        with self.card:
            with ui.grid(columns=2).classes('w-full gap-x-4 gap-y-2'):
                self.type_select = ui.select(
                    WORKOUT_KIND_OPTIONS,
                    value='running',
                    label='Type',
                    on_change=self._handle_type_change,
                ).props('dense dark')
                self.distance_input = ui.number(label='Distance', suffix='km').props('dense dark')
                self.duration_input = ui.number(label='Duration', suffix='min').props('dense dark')

                self.cadence_row = ui.element('div')
                with self.cadence_row:
                    self.cadence_input = ui.number(label='Cadence', suffix='step/min').props('dense dark')
                self.elevation_row = ui.element('div')
                with self.elevation_row:
                    self.elevation_input = ui.number(label='Elev Gain', suffix='meters').props('dense dark')
                self.elevation_row.set_visibility(False)

            for field in (self.distance_input, self.duration_input, self.cadence_input, self.elevation_input):
                field.on('keydown.enter', self._handle_submit)
            ui.button('Log workout', on_click=self._handle_submit).props('flat dense').classes('w-full mt-2 text-emerald-400')

        self.card.set_visibility(False)
        return self

    # ── Subscriptions ────────────────────────────────────────────────────

    def on_submit(self, callback) -> None:
        self._submit_handlers.append(callback)

    def on_type_change(self, callback) -> None:
        self._type_handlers.append(callback)

    def _handle_submit(self, *_):
        raw_inputs = self.values()
        for callback in self._submit_handlers:
            callback(raw_inputs)

    def _handle_type_change(self, e):
        for callback in self._type_handlers:
            callback(e.value)

    # ── Surface operations ───────────────────────────────────────────────

    def values(self) -> dict:
        return {
            'type': self.type_select.value,
            'distance': self.distance_input.value,
            'duration': self.duration_input.value,
            'cadence': self.cadence_input.value,
            'elevation': self.elevation_input.value,
        }

    def show(self):
        self.card.set_visibility(True)

    def hide(self):
        self.card.set_visibility(False)

    def clear(self):
        for field in (self.distance_input, self.duration_input, self.cadence_input, self.elevation_input):
            field.set_value(None)

    def focus_distance_field(self):
        self.distance_input.run_method('focus')

    def toggle_extra_field(self):
        self.cadence_row.set_visibility(not self.cadence_row.visible)
        self.elevation_row.set_visibility(not self.elevation_row.visible)
