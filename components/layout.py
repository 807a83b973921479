"""
components/layout.py
────────────────────
Application shell for Workout Map.

Owns:
  • Sidebar scaffolding (branding, entry form slot, workout list slot, session totals)
  • Map panel container (filled once the position resolves)

Does not own:
  • The workout pipeline (controller) or the form/list widgets themselves
"""
from __future__ import annotations

from nicegui import ui

from constants import UI_COPY, WORKOUT_ICONS, WORKOUT_KIND_OPTIONS


class AppShell:
    """Encapsulates app-level shell scaffolding and shell-owned UI state."""

    def __init__(self, form, workout_list):
        self.form = form
        self.workout_list = workout_list

        self.summary_container = None
        self.map_container = None
        self.map_hint_label = None

    def build(self):
        """Build the full shell (sidebar + map panel)."""
        with ui.row().classes('w-full h-screen m-0 p-0 gap-0 no-wrap overflow-hidden'):
            self.build_sidebar()
            self.build_map_panel()
        return self

    def build_sidebar(self):
        """Create the left sidebar: form first, then the list directly after it."""
        with ui.column().classes('w-[28rem] bg-zinc-900 p-6 h-screen flex-shrink-0 gap-4'):
            ui.label(f"{WORKOUT_ICONS['running']} {UI_COPY['sidebar_title']}").classes(
                'text-2xl font-black tracking-tight text-white mb-4'
            )

            with ui.scroll_area().classes('w-full flex-1'):
                self.form.build()
                self.workout_list.build()

            ui.separator().classes('my-3 bg-zinc-800')
            ui.label(UI_COPY['summary_title']).classes(
                'text-[10px] text-zinc-500 font-semibold tracking-[0.10em] mb-1'
            )
            self.summary_container = ui.column().classes('w-full gap-1')

    def build_map_panel(self):
        with ui.column().classes('flex-1 h-screen overflow-hidden p-0 gap-0'):
            self.map_container = ui.element('div').classes('w-full h-full')
            with self.map_container:
                self.map_hint_label = ui.label(UI_COPY['map_hint']).classes(
                    'm-auto text-zinc-500 text-sm'
                )

    def update_summary(self, summary):
        """Render per-kind session totals from a summary DataFrame."""
        self.summary_container.clear()
        with self.summary_container:
            if summary is None or summary.empty:
                ui.label(UI_COPY['empty_log']).classes('text-xs text-zinc-500')
                return
            for row in summary.to_dict('records'):
                label = WORKOUT_KIND_OPTIONS.get(row['kind'], row['kind'])
                with ui.row().classes('w-full justify-between items-center'):
                    ui.label(f"{WORKOUT_ICONS.get(row['kind'], '')} {label} ×{row['count']}").classes(
                        'text-sm font-bold text-zinc-200'
                    )
                    ui.label(f"{row['distance_km']:.1f} km · {row['duration_min']:.0f} min").classes(
                        'text-xs text-zinc-400'
                    )
