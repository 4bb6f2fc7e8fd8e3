#!/usr/bin/env python3
"""Momentum TUI: habits, weekly goals and progress in the terminal, powered by Textual."""

from __future__ import annotations

import re

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import (
    ContentSwitcher,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Static,
)

from momentum import (
    DAY_NAMES,
    GRID_HOURS,
    habits_completed,
    habits_remaining,
    hour_label,
    init_workspace,
    list_achievements,
    load_profile,
    open_store,
    setup_logging,
    stats_tiles,
    week_grid,
    workspace_root,
)
from momentum.store import DELETE_PROMPT


CSS = """
Screen {
    layout: vertical;
}

#summary {
    height: auto;
    padding: 0 1;
    background: $boost;
}

.section-title {
    text-style: bold;
    margin: 1 1 0 1;
}

#habits-table, #tasks-table {
    height: auto;
    max-height: 12;
}

#grid-table, #achievements-table {
    height: 1fr;
}

#new-task {
    margin: 0 1;
}
"""

NEW_TASK_PLACEHOLDER = "New goal, optionally ending in HH:MM…"

# "Title 14:30" -> ("Title", "14:30")
_TRAILING_TIME = re.compile(r"^(.*?)\s+(\d{1,2}:\d{2})\s*$")


def split_title_and_time(text: str) -> tuple[str, str]:
    """Split an optional trailing HH:MM off a typed goal."""
    m = _TRAILING_TIME.match(text.strip())
    if m:
        return m.group(1).strip(), m.group(2)
    return text.strip(), ""


def grid_slot(row: int, column: int) -> tuple[str, int] | None:
    """Map a schedule grid cell to its (day, hour); column 0 holds the hour labels."""
    if not (1 <= column <= len(DAY_NAMES)) or not (0 <= row < len(GRID_HOURS)):
        return None
    return DAY_NAMES[column - 1], GRID_HOURS[row]


# ── Pages ──────────────────────────────────────────────────────


class DashboardPage(Vertical):
    def compose(self) -> ComposeResult:
        yield Label("Daily habits", classes="section-title")
        yield DataTable(id="habits-table", cursor_type="row")
        yield Label("Goals", id="tasks-title", classes="section-title")
        yield DataTable(id="tasks-table", cursor_type="row")
        yield Input(placeholder=NEW_TASK_PLACEHOLDER, id="new-task")


class SchedulePage(Vertical):
    def compose(self) -> ComposeResult:
        yield Label("Weekly schedule", classes="section-title")
        yield DataTable(id="grid-table", cursor_type="cell")


class AchievementsPage(Vertical):
    def compose(self) -> ComposeResult:
        yield Label("Achievements", classes="section-title")
        yield DataTable(id="achievements-table", cursor_type="row")


class StatsPage(Vertical):
    def compose(self) -> ComposeResult:
        yield Label("Stats", classes="section-title")
        yield Static(id="stats-info")


# ── Main app ───────────────────────────────────────────────────


class MomentumApp(App):
    """Habit and weekly goal tracker."""

    TITLE = "Momentum"
    CSS = CSS

    BINDINGS = [
        Binding("1", "show('dashboard')", "Home"),
        Binding("2", "show('schedule')", "Schedule"),
        Binding("3", "show('achievements')", "Achievements"),
        Binding("4", "show('stats')", "Stats"),
        Binding("plus,equals_sign", "increment_habit", "+1"),
        Binding("minus", "decrement_habit", "-1"),
        Binding("t", "toggle_task", "Toggle"),
        Binding("x", "delete_task", "Delete"),
        Binding("left_square_bracket", "shift_day(-1)", "Prev day"),
        Binding("right_square_bracket", "shift_day(1)", "Next day"),
        Binding("n", "new_task", "New goal"),
        Binding("a", "add_at_cursor", "Add at slot"),
        Binding("escape", "blur_focus", "Back"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.store = open_store(confirm=self._confirm_delete)
        self.day = self.store.today
        self._pending_delete: tuple[str, str] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="summary")
        with ContentSwitcher(initial="dashboard", id="pages"):
            yield DashboardPage(id="dashboard")
            yield SchedulePage(id="schedule")
            yield AchievementsPage(id="achievements")
            yield StatsPage(id="stats")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#habits-table", DataTable).add_columns("", "Habit", "Progress", "Unit")
        self.query_one("#tasks-table", DataTable).add_columns("", "Time", "Goal")
        self.query_one("#grid-table", DataTable).add_columns("", *DAY_NAMES)
        self.query_one("#achievements-table", DataTable).add_columns("", "Achievement", "Description", "Status")
        self._refresh()

    # ── Confirmation collaborator ──────────────────────────────

    def _confirm_delete(self, prompt: str) -> bool:
        # Deletion is armed by the first press and confirmed by the second.
        return self._pending_delete is not None

    # ── Rendering ──────────────────────────────────────────────

    def _refresh(self) -> None:
        store = self.store
        summary = (
            f"Level {store.level} • {store.points} points"
            + (f" • \U0001f525 {store.streak} days" if store.streak > 0 else "")
            + f"\n{store.completed_today}% complete • "
            f"{habits_completed(store.habits)} habits done, {habits_remaining(store.habits)} remaining"
        )
        if store.reward_unlocked:
            summary += f"\n\U0001f389 Well done! {store.completed_today}% complete, the reward is unlocked."
        else:
            summary += f"\n{store.reward_gap}% more to unlock the reward."
        self.query_one("#summary", Static).update(summary)

        habits = self.query_one("#habits-table", DataTable)
        row = habits.cursor_row
        habits.clear()
        for h in store.habits:
            mark = "✓" if h.is_complete else " "
            habits.add_row(f"{mark} {h.icon}", h.title, f"{h.current}/{h.target}", h.unit)
        if store.habits:
            habits.move_cursor(row=min(row, len(store.habits) - 1))

        suffix = " (today)" if self.day == store.today else ""
        self.query_one("#tasks-title", Label).update(f"Goals for {self.day}{suffix}")
        tasks_table = self.query_one("#tasks-table", DataTable)
        row = tasks_table.cursor_row
        tasks_table.clear()
        day_tasks = store.schedule.tasks_for(self.day)
        for t in day_tasks:
            tasks_table.add_row("●" if t.completed else "○", t.time or "—", f"{t.icon} {t.title}")
        if day_tasks:
            tasks_table.move_cursor(row=min(row, len(day_tasks) - 1))

        grid = self.query_one("#grid-table", DataTable)
        grid.clear()
        for hour, cells in week_grid(store.schedule):
            grid.add_row(
                hour_label(hour),
                *[", ".join(t.title for t in cells[day]) for day in DAY_NAMES],
            )

        achievements = self.query_one("#achievements-table", DataTable)
        achievements.clear()
        for a in list_achievements(store.progress):
            achievements.add_row(a.icon, a.title, a.description, "unlocked" if a.unlocked else "locked")

        stats = "\n".join(f"{label}: {value}" for label, value in stats_tiles(store.progress))
        self.query_one("#stats-info", Static).update(stats)

    # ── Actions ────────────────────────────────────────────────

    def action_show(self, page: str) -> None:
        self.store.navigate(page)
        self.query_one("#pages", ContentSwitcher).current = self.store.ui.page

    def _selected_habit_id(self) -> str | None:
        row = self.query_one("#habits-table", DataTable).cursor_row
        if 0 <= row < len(self.store.habits):
            return self.store.habits[row].id
        return None

    def _selected_task_id(self) -> str | None:
        tasks = self.store.schedule.tasks_for(self.day)
        row = self.query_one("#tasks-table", DataTable).cursor_row
        if 0 <= row < len(tasks):
            return tasks[row].id
        return None

    def action_increment_habit(self) -> None:
        habit_id = self._selected_habit_id()
        if habit_id:
            self.store.increment_habit(habit_id)
            self._refresh()

    def action_decrement_habit(self) -> None:
        habit_id = self._selected_habit_id()
        if habit_id:
            self.store.decrement_habit(habit_id)
            self._refresh()

    def action_toggle_task(self) -> None:
        task_id = self._selected_task_id()
        if task_id:
            self.store.toggle_task(self.day, task_id)
            self._refresh()

    def action_delete_task(self) -> None:
        task_id = self._selected_task_id()
        if not task_id:
            return
        key = (self.day, task_id)
        if self._pending_delete != key:
            self._pending_delete = key
            self.notify(f"{DELETE_PROMPT} Press x again to confirm.", title="Delete")
            return
        self.store.delete_task(self.day, task_id)
        self._pending_delete = None
        self._refresh()

    def action_shift_day(self, step: int) -> None:
        index = DAY_NAMES.index(self.day)
        self.day = DAY_NAMES[(index + step) % len(DAY_NAMES)]
        self._pending_delete = None
        self._refresh()

    def action_new_task(self) -> None:
        self.action_show("dashboard")
        self.store.open_task_form(self.day)
        self.query_one("#new-task", Input).focus()

    def _open_form_at(self, row: int, column: int) -> None:
        slot = grid_slot(row, column)
        if slot is None:
            return
        day, hour = slot
        self.day = day
        self._pending_delete = None
        self.action_show("dashboard")
        self.store.open_task_form(day, hour)
        new_task = self.query_one("#new-task", Input)
        new_task.placeholder = f"New goal for {day} at {self.store.ui.selected_time}…"
        new_task.focus()
        self._refresh()

    def action_add_at_cursor(self) -> None:
        if self.store.ui.page != "schedule":
            return
        cursor = self.query_one("#grid-table", DataTable).cursor_coordinate
        self._open_form_at(cursor.row, cursor.column)

    @on(DataTable.CellSelected, "#grid-table")
    def _on_grid_cell(self, event: DataTable.CellSelected) -> None:
        self._open_form_at(event.coordinate.row, event.coordinate.column)

    def action_blur_focus(self) -> None:
        self.store.close_task_form()
        self.query_one("#new-task", Input).placeholder = NEW_TASK_PLACEHOLDER
        self.set_focus(None)

    @on(Input.Submitted, "#new-task")
    def _on_new_task(self, event: Input.Submitted) -> None:
        ui = self.store.ui
        if not ui.task_form_open or ui.selected_day != self.day:
            self.store.open_task_form(self.day)
        title, time = split_title_and_time(event.value)
        # No typed time keeps the slot picked on the schedule grid.
        self.store.submit_task_form(title, time or None)
        if not self.store.ui.task_form_open:
            event.input.value = ""
            event.input.placeholder = NEW_TASK_PLACEHOLDER
        self._refresh()


# ── Entry point ────────────────────────────────────────────────


def main() -> None:
    root = init_workspace(workspace_root())
    setup_logging(load_profile(root).log_level, log_file=root / "momentum.log")
    MomentumApp().run()


if __name__ == "__main__":
    main()
