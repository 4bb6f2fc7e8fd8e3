"""Tests for momentum/models.py: dataclass serialization and invariants."""

from momentum.models import (
    DAY_NAMES,
    DEFAULT_TASK_ICON,
    Habit,
    Profile,
    Progress,
    Task,
    WeeklySchedule,
    default_habits,
    habits_from_list,
)


def test_habit_clamps_on_construction():
    assert Habit(id="h", current=15, target=10).current == 10
    assert Habit(id="h", current=-2, target=10).current == 0


def test_habit_target_is_positive():
    assert Habit(id="h", target=0).target == 1


def test_habit_from_dict_bad_numbers():
    h = Habit.from_dict({"id": "x", "current": "lots", "target": None})
    assert h.current == 0
    assert h.target == 1


def test_habit_round_trip():
    data = {"id": "water", "title": "Water", "icon": "\U0001f4a7", "current": 2, "target": 3, "unit": "liters"}
    assert Habit.from_dict(data).to_dict() == data


def test_default_habits():
    habits = default_habits()
    assert [h.id for h in habits] == ["reading", "water", "meals"]
    assert [h.target for h in habits] == [10, 3, 3]
    assert all(h.current == 0 for h in habits)


def test_habits_from_list_non_list_gives_defaults():
    assert [h.id for h in habits_from_list({"oops": 1})] == ["reading", "water", "meals"]
    assert habits_from_list([]) == []


def test_task_numeric_id_becomes_string():
    t = Task.from_dict({"id": 1704621600000, "title": "Gym"})
    assert t.id == "1704621600000"
    assert t.icon == DEFAULT_TASK_ICON
    assert t.time == ""
    assert t.completed is False


def test_task_completed_accepts_only_true():
    assert Task.from_dict({"id": "1", "completed": True}).completed is True
    assert Task.from_dict({"id": "1", "completed": "false"}).completed is False
    assert Task.from_dict({"id": "1", "completed": "true"}).completed is False
    assert Task.from_dict({"id": "1", "completed": 1}).completed is False


def test_schedule_has_all_days():
    s = WeeklySchedule()
    assert list(s.days) == list(DAY_NAMES)
    assert all(tasks == [] for tasks in s.days.values())


def test_schedule_from_dict_drops_unknown_days():
    s = WeeklySchedule.from_dict({
        "Monday": [{"id": "1", "title": "A"}],
        "Funday": [{"id": "2", "title": "B"}],
    })
    assert list(s.days) == list(DAY_NAMES)
    assert [t.id for t in s.tasks_for("Monday")] == ["1"]
    assert s.tasks_for("Funday") == []


def test_schedule_from_garbage():
    assert WeeklySchedule.from_dict("nope").to_dict() == WeeklySchedule().to_dict()


def test_schedule_find_task():
    s = WeeklySchedule.from_dict({"Friday": [{"id": "a", "title": "A"}]})
    assert s.find_task("Friday", "a").title == "A"
    assert s.find_task("Friday", "b") is None
    assert s.find_task("Caturday", "a") is None
    assert s.find_task(["Friday"], "a") is None
    assert s.tasks_for(["Friday"]) == []


def test_progress_from_values():
    p = Progress.from_values(None, None, None)
    assert (p.streak, p.points, p.level) == (0, 0, 1)
    p = Progress.from_values(-1, "30", 0)
    assert (p.streak, p.points, p.level) == (0, 30, 1)


def test_profile_from_dict():
    p = Profile.from_dict({"timezone": "Asia/Jerusalem", "reward_threshold": 150, "log_level": "debug"})
    assert p.timezone == "Asia/Jerusalem"
    assert p.reward_threshold == 100
    assert p.log_level == "DEBUG"


def test_profile_from_empty():
    p = Profile.from_dict({})
    assert p.timezone == "UTC"
    assert p.reward_threshold == 80
