"""Tests for momentum/completion.py."""

from datetime import date

from momentum.clock import FixedClock
from momentum.completion import (
    completion_percent,
    day_index,
    day_name,
    habits_completed,
    habits_remaining,
    reward_gap,
    reward_unlocked,
    today_name,
)
from momentum.models import Habit, Task


def test_completion_example():
    habits = [Habit(id="h", current=5, target=10)]
    tasks = [Task(id="1", completed=True), Task(id="2", completed=False)]
    assert completion_percent(habits, tasks) == 50


def test_completion_nothing_to_do():
    assert completion_percent([], []) == 0


def test_completion_rounds_half_up():
    # 1/8 = 12.5%
    habits = [Habit(id="h", current=1, target=8)]
    assert completion_percent(habits, []) == 13
    # 1/3 = 33.3%
    assert completion_percent([Habit(id="h", current=1, target=3)], []) == 33
    # 2/3 = 66.7%
    assert completion_percent([Habit(id="h", current=2, target=3)], []) == 67


def test_completion_tasks_only():
    tasks = [Task(id="1", completed=True), Task(id="2", completed=True)]
    assert completion_percent([], tasks) == 100


def test_day_index_sunday_first():
    assert day_index(date(2024, 1, 7)) == 0
    assert day_index(date(2024, 1, 8)) == 1
    assert day_index(date(2024, 1, 13)) == 6


def test_day_name():
    assert day_name(date(2024, 1, 7)) == "Sunday"
    assert day_name(date(2024, 1, 12)) == "Friday"


def test_today_name_uses_clock():
    assert today_name(FixedClock(date(2024, 1, 10))) == "Wednesday"


def test_reward_unlocked():
    assert reward_unlocked(80) is True
    assert reward_unlocked(79) is False
    assert reward_unlocked(50, threshold=50) is True


def test_reward_gap():
    assert reward_gap(53) == 27
    assert reward_gap(80) == 0
    assert reward_gap(95) == 0
    assert reward_gap(40, threshold=50) == 10


def test_habit_counters():
    habits = [
        Habit(id="a", current=3, target=3),
        Habit(id="b", current=1, target=3),
        Habit(id="c", current=10, target=10),
    ]
    assert habits_completed(habits) == 2
    assert habits_remaining(habits) == 1
