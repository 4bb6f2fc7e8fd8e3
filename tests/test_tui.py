"""Tests for cli/tui.py input parsing and grid slot mapping."""

from cli.tui import grid_slot, split_title_and_time


def test_split_trailing_time():
    assert split_title_and_time("Dentist 14:30") == ("Dentist", "14:30")
    assert split_title_and_time("  Run 5k 7:00 ") == ("Run 5k", "7:00")


def test_split_without_time():
    assert split_title_and_time("Call mom") == ("Call mom", "")
    assert split_title_and_time("14:30") == ("14:30", "")
    assert split_title_and_time("   ") == ("", "")


def test_grid_slot_maps_cell_to_day_and_hour():
    assert grid_slot(0, 1) == ("Sunday", 5)
    assert grid_slot(2, 4) == ("Wednesday", 7)
    assert grid_slot(18, 7) == ("Saturday", 23)


def test_grid_slot_outside_days_or_hours():
    assert grid_slot(3, 0) is None
    assert grid_slot(3, 8) is None
    assert grid_slot(19, 2) is None
    assert grid_slot(-1, 2) is None
