"""State store: owns habits, schedule and progress, and persists after each change.

All mutations are total. Unknown habit ids, day names or task ids, and blank
task titles, leave the state untouched without raising; callers re-read the
state to see what happened.
"""

from __future__ import annotations

import logging
from pathlib import Path
from time import time_ns
from typing import Any, Callable

from momentum.clock import SystemClock
from momentum.completion import (
    completion_percent,
    day_name,
    reward_gap as _reward_gap,
    reward_unlocked as _reward_unlocked,
)
from momentum.grid import hour_label, normalize_time
from momentum.models import (
    DAY_NAMES,
    DEFAULT_REWARD_THRESHOLD,
    PAGES,
    POINTS_PER_COMPLETION,
    Habit,
    Progress,
    Task,
    ViewState,
    WeeklySchedule,
    default_habits,
    habits_from_list,
)
from momentum.storage import Storage, select_storage
from momentum.workspace import load_profile

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Delete this goal?"

Confirm = Callable[[str], bool]


def decline(prompt: str) -> bool:
    return False


class StateStore:
    """Single owner of the application state.

    ``storage`` persists the five state keys, ``clock`` supplies today's
    date, ``confirm`` is asked before a task is deleted.
    """

    def __init__(
        self,
        storage: Storage,
        clock,
        confirm: Confirm | None = None,
        habits: list[Habit] | None = None,
        schedule: WeeklySchedule | None = None,
        progress: Progress | None = None,
        reward_threshold: int = DEFAULT_REWARD_THRESHOLD,
    ) -> None:
        self.storage = storage
        self.clock = clock
        self.confirm = confirm or decline
        self.reward_threshold = reward_threshold
        self.habits = habits if habits is not None else default_habits()
        self.schedule = schedule or WeeklySchedule()
        self.progress = progress or Progress()
        self.ui = ViewState()
        self._last_task_id = 0
        self.completed_today = 0
        self._recompute()

    @classmethod
    def load(
        cls,
        storage: Storage,
        clock,
        confirm: Confirm | None = None,
        reward_threshold: int = DEFAULT_REWARD_THRESHOLD,
    ) -> StateStore:
        """Build a store from persisted state; absent keys take defaults."""
        stored_habits = storage.load("habits")
        return cls(
            storage,
            clock,
            confirm=confirm,
            habits=habits_from_list(stored_habits) if stored_habits is not None else None,
            schedule=WeeklySchedule.from_dict(storage.load("schedule")),
            progress=Progress.from_values(
                storage.load("streak"),
                storage.load("points"),
                storage.load("level"),
            ),
            reward_threshold=reward_threshold,
        )

    # ── Read side ─────────────────────────────────────────────

    @property
    def streak(self) -> int:
        return self.progress.streak

    @property
    def points(self) -> int:
        return self.progress.points

    @property
    def level(self) -> int:
        return self.progress.level

    @property
    def today(self) -> str:
        return day_name(self.clock.today())

    @property
    def reward_unlocked(self) -> bool:
        return _reward_unlocked(self.completed_today, self.reward_threshold)

    @property
    def reward_gap(self) -> int:
        return _reward_gap(self.completed_today, self.reward_threshold)

    def find_habit(self, habit_id: str) -> Habit | None:
        for h in self.habits:
            if h.id == habit_id:
                return h
        return None

    def today_tasks(self) -> list[Task]:
        return self.schedule.tasks_for(self.today)

    def snapshot(self) -> dict[str, Any]:
        """Plain-data view of everything a page renders from."""
        return {
            "habits": [h.to_dict() for h in self.habits],
            "schedule": self.schedule.to_dict(),
            "streak": self.streak,
            "points": self.points,
            "level": self.level,
            "completedToday": self.completed_today,
            "rewardUnlocked": self.reward_unlocked,
            "today": self.today,
        }

    # ── Habits ────────────────────────────────────────────────

    def increment_habit(self, habit_id: str) -> None:
        habit = self.find_habit(habit_id)
        if habit is None:
            logger.debug("increment_habit: unknown habit %r", habit_id)
            return
        previous = habit.current
        habit.current = habit.clamp(previous + 1)
        if habit.current == previous:
            return
        if previous < habit.target and habit.current == habit.target:
            self._award(f"habit {habit_id} reached {habit.target} {habit.unit}".rstrip())
        self._commit()

    def decrement_habit(self, habit_id: str) -> None:
        habit = self.find_habit(habit_id)
        if habit is None:
            logger.debug("decrement_habit: unknown habit %r", habit_id)
            return
        previous = habit.current
        habit.current = habit.clamp(previous - 1)
        if habit.current != previous:
            self._commit()

    # ── Tasks ─────────────────────────────────────────────────

    def add_task(self, day: str, title: str, time: str | None = "") -> None:
        if day not in DAY_NAMES:
            logger.debug("add_task: unknown day %r", day)
            return
        title = (title or "").strip()
        if not title:
            logger.debug("add_task: blank title rejected")
            return
        task = Task(
            id=self._new_task_id(),
            title=title,
            time=normalize_time(time),
        )
        self.schedule.days[day].append(task)
        logger.debug("Added task %s to %s", task.id, day)
        self._commit()

    def toggle_task(self, day: str, task_id: str) -> None:
        if day not in DAY_NAMES:
            logger.debug("toggle_task: unknown day %r", day)
            return
        task = self.schedule.find_task(day, task_id)
        if task is None:
            logger.debug("toggle_task: %r not found on %r", task_id, day)
            return
        task.completed = not task.completed
        if task.completed:
            self._award(f"task {task_id} completed")
        self._commit()

    def delete_task(self, day: str, task_id: str, confirm: bool | None = None) -> None:
        """Remove a task once confirmed.

        ``confirm`` answers the prompt for this call only; when ``None`` the
        store's confirmation collaborator is asked.
        """
        if day not in DAY_NAMES:
            logger.debug("delete_task: unknown day %r", day)
            return
        task = self.schedule.find_task(day, task_id)
        if task is None:
            logger.debug("delete_task: %r not found on %r", task_id, day)
            return
        answer = self.confirm(DELETE_PROMPT) if confirm is None else confirm
        if not answer:
            logger.debug("delete_task: %r kept, not confirmed", task_id)
            return
        self.schedule.days[day] = [t for t in self.schedule.days[day] if t.id != task_id]
        self._commit()

    # ── View selection ────────────────────────────────────────

    def navigate(self, page: str) -> None:
        if page not in PAGES:
            return
        self.ui = ViewState(page=page)

    def open_task_form(self, day: str, hour: int | None = None) -> None:
        self.ui.task_form_open = True
        self.ui.selected_day = day
        self.ui.selected_time = hour_label(hour) if hour is not None else ""

    def close_task_form(self) -> None:
        self.ui.task_form_open = False

    def submit_task_form(self, title: str, time: str | None = None) -> None:
        """Add a task to the pre-selected day; the form stays open if rejected."""
        if time is None:
            time = self.ui.selected_time
        day = self.ui.selected_day
        before = len(self.schedule.tasks_for(day))
        self.add_task(day, title, time)
        if len(self.schedule.tasks_for(day)) > before:
            self.close_task_form()

    # ── Internals ─────────────────────────────────────────────

    def _award(self, reason: str) -> None:
        self.progress.points += POINTS_PER_COMPLETION
        logger.debug("+%d points: %s", POINTS_PER_COMPLETION, reason)

    def _new_task_id(self) -> str:
        """Millisecond timestamp, bumped past anything already issued or stored."""
        candidate = max(time_ns() // 1_000_000, self._last_task_id + 1)
        taken = self.schedule.all_ids()
        while str(candidate) in taken:
            candidate += 1
        self._last_task_id = candidate
        return str(candidate)

    def _recompute(self) -> None:
        self.completed_today = completion_percent(self.habits, self.today_tasks())

    def _commit(self) -> None:
        self._recompute()
        self.save()

    def save(self) -> None:
        """Write all five state keys."""
        self.storage.save("habits", [h.to_dict() for h in self.habits])
        self.storage.save("streak", self.progress.streak)
        self.storage.save("level", self.progress.level)
        self.storage.save("points", self.progress.points)
        self.storage.save("schedule", self.schedule.to_dict())


def open_store(root: Path | None = None, confirm: Confirm | None = None) -> StateStore:
    """Load the store for a workspace, choosing storage and clock from its profile."""
    profile = load_profile(root)
    return StateStore.load(
        select_storage(root),
        SystemClock.for_workspace(root),
        confirm=confirm,
        reward_threshold=profile.reward_threshold,
    )
