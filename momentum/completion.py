"""Daily completion percentage, "today" derivation and the reward gate."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from momentum.models import DAY_NAMES, DEFAULT_REWARD_THRESHOLD, Habit, Task


def day_index(d: date) -> int:
    """Weekday index with 0 = Sunday through 6 = Saturday."""
    return d.isoweekday() % 7


def day_name(d: date) -> str:
    return DAY_NAMES[day_index(d)]


def today_name(clock) -> str:
    return day_name(clock.today())


def completion_percent(habits: Iterable[Habit], today_tasks: Sequence[Task]) -> int:
    """Combined habit + task progress for today, 0-100.

    Habits contribute their running counts against their targets, tasks
    contribute one unit each. Rounds half up; 0 when there is nothing to do.
    """
    habit_total = 0
    habit_completed = 0
    for h in habits:
        habit_total += h.target
        habit_completed += h.current
    task_total = len(today_tasks)
    task_completed = sum(1 for t in today_tasks if t.completed)

    denominator = habit_total + task_total
    if denominator <= 0:
        return 0
    numerator = habit_completed + task_completed
    return (200 * numerator + denominator) // (2 * denominator)


def reward_unlocked(percent: int, threshold: int = DEFAULT_REWARD_THRESHOLD) -> bool:
    return percent >= threshold


def reward_gap(percent: int, threshold: int = DEFAULT_REWARD_THRESHOLD) -> int:
    """Percentage points still missing before the reward unlocks."""
    return max(0, threshold - percent)


def habits_completed(habits: Iterable[Habit]) -> int:
    return sum(1 for h in habits if h.is_complete)


def habits_remaining(habits: Sequence[Habit]) -> int:
    return len(habits) - habits_completed(habits)
