"""Achievement badges and stat tiles derived from progress."""

from __future__ import annotations

from dataclasses import dataclass

from momentum.models import Progress


@dataclass
class Achievement:
    key: str
    title: str
    icon: str
    description: str
    unlocked: bool = False

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "title": self.title,
            "icon": self.icon,
            "description": self.description,
            "unlocked": self.unlocked,
        }


def list_achievements(progress: Progress) -> list[Achievement]:
    # avid-reader and athlete have no tracking behind them yet and stay locked.
    return [
        Achievement("seven-day-streak", "7 days in a row", "\U0001f525", "7 consecutive days",
                    unlocked=progress.streak >= 7),
        Achievement("strong-start", "Strong start", "⭐", "Your first day",
                    unlocked=progress.points > 0),
        Achievement("avid-reader", "Avid reader", "\U0001f4da", "100 pages"),
        Achievement("athlete", "Athlete", "\U0001f4aa", "30 workouts"),
    ]


def stats_tiles(progress: Progress) -> list[tuple[str, int]]:
    return [
        ("Day streak", progress.streak),
        ("Points", progress.points),
        ("Level", progress.level),
    ]
