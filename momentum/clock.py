"""Clock collaborators used to derive "today"."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from momentum.workspace import get_user_timezone


class SystemClock:
    """Wall clock in the user's timezone."""

    def __init__(self, tz: ZoneInfo | None = None) -> None:
        self.tz = tz or ZoneInfo("UTC")

    @classmethod
    def for_workspace(cls, root: Path | None = None) -> SystemClock:
        return cls(get_user_timezone(root))

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    """Always reports the same day. Used by tests and replays."""

    def __init__(self, day: date) -> None:
        self.day = day

    def today(self) -> date:
        return self.day
