"""Shared test fixtures for Momentum tests."""

from __future__ import annotations

import json
import os
from datetime import date
from pathlib import Path

import pytest
import yaml

from momentum.clock import FixedClock
from momentum.storage import MemoryStorage
from momentum.store import StateStore

SUNDAY = date(2024, 1, 7)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with a profile and stored state."""
    root = tmp_path / "workspace"
    (root / "store").mkdir(parents=True)

    profile = {
        "timezone": "UTC",
        "reward_threshold": 80,
        "log_level": "DEBUG",
    }
    (root / "profile.yaml").write_text(
        yaml.dump(profile, default_flow_style=False), encoding="utf-8"
    )

    habits = [
        {"id": "reading", "title": "Read 10 pages", "icon": "\U0001f4d6", "current": 4, "target": 10, "unit": "pages"},
        {"id": "water", "title": "Drink 3 liters of water", "icon": "\U0001f4a7", "current": 3, "target": 3, "unit": "liters"},
    ]
    schedule = {
        "Sunday": [
            {"id": 1704621600000, "title": "Gym", "icon": "\U0001f3af", "time": "07:00", "completed": True},
            {"id": "1704621600001", "title": "Call mom", "icon": "\U0001f3af", "time": "", "completed": False},
        ],
        "Monday": [
            {"id": "1704708000000", "title": "Dentist", "icon": "\U0001f3af", "time": "14:30", "completed": False},
        ],
    }
    for key, value in (
        ("habits", habits),
        ("schedule", schedule),
        ("streak", 3),
        ("points", 40),
        ("level", 2),
    ):
        (root / "store" / f"{key}.json").write_text(json.dumps(value, indent=2), encoding="utf-8")

    os.environ["MOMENTUM_ROOT"] = str(root)
    yield root
    if "MOMENTUM_ROOT" in os.environ:
        del os.environ["MOMENTUM_ROOT"]


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(SUNDAY)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage, clock: FixedClock) -> StateStore:
    """A fresh store with default habits on a Sunday, deletions confirmed."""
    return StateStore.load(storage, clock, confirm=lambda prompt: True)
