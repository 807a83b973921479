"""
components/workout_list.py
──────────────────────────
Workout entries shown under the form, one card per logged workout.

create_workout_card renders a WorkoutEntry and knows nothing about the
controller or the session state.
"""
from nicegui import ui

from constants import UI_COPY, WORKOUT_ACCENT_COLORS


def create_workout_card(entry):
    """Render a single workout entry card."""
    accent = WORKOUT_ACCENT_COLORS.get(entry.kind, '#10b981')

    card = ui.card().classes(
        f'w-full px-4 py-3 bg-zinc-800 border-none no-shadow workout workout--{entry.kind}'
    ).style(f'border-left: 5px solid {accent};')
    card.props(f'data-id={entry.workout_id}')

    with card:
        ui.label(entry.title).classes('text-base font-bold text-zinc-100 workout__title')
        with ui.row().classes('w-full gap-4 items-baseline no-wrap'):
            for detail in entry.details:
                with ui.row().classes('items-baseline gap-1 no-wrap workout__details'):
                    ui.label(detail.icon).classes('text-sm')
                    ui.label(detail.value).classes('text-base font-bold text-white')
                    ui.label(detail.unit.upper()).classes('text-[10px] text-zinc-400 font-bold tracking-wider')

    return card


class WorkoutList:
    """List surface: entries are appended below the form in logging order."""

    def __init__(self):
        self.container = None
        self.empty_label = None
        self.entry_count = 0

    def build(self):
        self.container = ui.column().classes('w-full gap-3')
        with self.container:
            self.empty_label = ui.label(UI_COPY['empty_log']).classes('text-sm text-zinc-500 italic')
        return self

    def append_entry_after_form(self, entry):
        if self.empty_label is not None:
            self.empty_label.delete()
            self.empty_label = None
        with self.container:
            card = create_workout_card(entry)
        self.entry_count += 1
        return card
