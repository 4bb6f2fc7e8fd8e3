"""Typed dataclasses for the Momentum data model.

All persisted models use from_dict/to_dict for JSON serialization.
Unknown keys are ignored; missing keys use defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

PAGES = ("dashboard", "schedule", "achievements", "stats")

POINTS_PER_COMPLETION = 10
DEFAULT_TASK_ICON = "\U0001f3af"
DEFAULT_REWARD_THRESHOLD = 80


def _int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


# ── Habits ────────────────────────────────────────────────────


@dataclass
class Habit:
    """A recurring goal counted toward a fixed daily target."""

    id: str = ""
    title: str = ""
    icon: str = ""
    current: int = 0
    target: int = 1
    unit: str = ""

    def __post_init__(self) -> None:
        self.target = max(1, self.target)
        self.current = self.clamp(self.current)

    def clamp(self, value: int) -> int:
        return max(0, min(value, self.target))

    @property
    def is_complete(self) -> bool:
        return self.current >= self.target

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Habit:
        return cls(
            id=str(d.get("id", "")),
            title=str(d.get("title", "")),
            icon=str(d.get("icon", "")),
            current=_int(d.get("current"), 0),
            target=_int(d.get("target"), 1),
            unit=str(d.get("unit", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "icon": self.icon,
            "current": self.current,
            "target": self.target,
            "unit": self.unit,
        }


def default_habits() -> list[Habit]:
    """The three habits seeded on first run."""
    return [
        Habit(id="reading", title="Read 10 pages", icon="\U0001f4d6", target=10, unit="pages"),
        Habit(id="water", title="Drink 3 liters of water", icon="\U0001f4a7", target=3, unit="liters"),
        Habit(id="meals", title="3 regular meals", icon="\U0001f37d\ufe0f", target=3, unit="meals"),
    ]


def habits_from_list(items: Any) -> list[Habit]:
    if not isinstance(items, list):
        return default_habits()
    return [Habit.from_dict(h) for h in items if isinstance(h, dict)]


# ── Tasks ─────────────────────────────────────────────────────


@dataclass
class Task:
    """A one-off goal on a single day of the week."""

    id: str = ""
    title: str = ""
    icon: str = DEFAULT_TASK_ICON
    time: str = ""  # HH:MM, or "" when unscheduled
    completed: bool = False

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Task:
        return cls(
            id=str(d.get("id", "")),
            title=str(d.get("title", "")),
            icon=str(d.get("icon", DEFAULT_TASK_ICON)),
            time=str(d.get("time") or ""),
            completed=d.get("completed") is True,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "icon": self.icon,
            "time": self.time,
            "completed": self.completed,
        }


@dataclass
class WeeklySchedule:
    """Seven ordered task lists, one per day name."""

    days: dict[str, list[Task]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Keep all seven keys, in week order, dropping anything else.
        self.days = {name: list(self.days.get(name, [])) for name in DAY_NAMES}

    def tasks_for(self, day: str) -> list[Task]:
        if day not in DAY_NAMES:
            return []
        return self.days[day]

    def find_task(self, day: str, task_id: str) -> Task | None:
        for t in self.tasks_for(day):
            if t.id == task_id:
                return t
        return None

    def all_ids(self) -> set[str]:
        return {t.id for tasks in self.days.values() for t in tasks}

    @classmethod
    def from_dict(cls, d: Any) -> WeeklySchedule:
        if not d or not isinstance(d, dict):
            return cls()
        days = {}
        for name in DAY_NAMES:
            items = d.get(name) or []
            if isinstance(items, list):
                days[name] = [Task.from_dict(t) for t in items if isinstance(t, dict)]
        return cls(days=days)

    def to_dict(self) -> dict[str, Any]:
        return {name: [t.to_dict() for t in self.days[name]] for name in DAY_NAMES}


# ── Progress ──────────────────────────────────────────────────


@dataclass
class Progress:
    streak: int = 0
    points: int = 0
    level: int = 1

    @classmethod
    def from_values(cls, streak: Any, points: Any, level: Any) -> Progress:
        return cls(
            streak=max(0, _int(streak, 0)),
            points=max(0, _int(points, 0)),
            level=max(1, _int(level, 1)),
        )


# ── View selection ────────────────────────────────────────────


@dataclass
class ViewState:
    """Ephemeral page/form selection. Never persisted."""

    page: str = "dashboard"
    task_form_open: bool = False
    selected_day: str = ""
    selected_time: str = ""


# ── Profile ───────────────────────────────────────────────────


@dataclass
class Profile:
    timezone: str = "UTC"
    reward_threshold: int = DEFAULT_REWARD_THRESHOLD
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Profile:
        if not d or not isinstance(d, dict):
            return cls()
        threshold = _int(d.get("reward_threshold"), DEFAULT_REWARD_THRESHOLD)
        return cls(
            timezone=str(d.get("timezone", "UTC")),
            reward_threshold=max(0, min(threshold, 100)),
            log_level=str(d.get("log_level", "WARNING")).upper(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "timezone": self.timezone,
            "reward_threshold": self.reward_threshold,
            "log_level": self.log_level,
        }
