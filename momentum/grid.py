"""Hour-by-day grid placement for the weekly schedule view."""

from __future__ import annotations

import re

from momentum.models import DAY_NAMES, Task, WeeklySchedule

GRID_HOURS = range(5, 24)

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_time(value: str) -> tuple[int, int] | None:
    """Parse a 24-hour 'HH:MM' string; None if it is not one."""
    m = _TIME_RE.match((value or "").strip())
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour, minute


def normalize_time(value: str | None) -> str:
    """Return a zero-padded 'HH:MM', or '' for blank/invalid input."""
    parsed = parse_time(value or "")
    if parsed is None:
        return ""
    return f"{parsed[0]:02d}:{parsed[1]:02d}"


def hour_label(hour: int) -> str:
    return f"{hour:02d}:00"


def task_hour(task: Task) -> int | None:
    parsed = parse_time(task.time)
    return parsed[0] if parsed else None


def tasks_at(schedule: WeeklySchedule, day: str, hour: int) -> list[Task]:
    return [t for t in schedule.tasks_for(day) if task_hour(t) == hour]


def unscheduled_tasks(schedule: WeeklySchedule, day: str) -> list[Task]:
    return [t for t in schedule.tasks_for(day) if task_hour(t) is None]


def week_grid(schedule: WeeklySchedule) -> list[tuple[int, dict[str, list[Task]]]]:
    """Rows of (hour, {day: tasks starting in that hour}) for GRID_HOURS.

    Tasks outside the grid hours only show up in the per-day lists.
    """
    return [
        (hour, {day: tasks_at(schedule, day, hour) for day in DAY_NAMES})
        for hour in GRID_HOURS
    ]
