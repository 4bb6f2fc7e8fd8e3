"""Workspace root, profile, timezone and path helpers for Momentum."""

from __future__ import annotations

import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from momentum.fileio import read_yaml, write_yaml_atomic
from momentum.models import Profile


def workspace_root() -> Path:
    """Get the workspace root directory (holds profile.yaml and store/)."""
    return Path(
        os.environ.get("MOMENTUM_ROOT", str(Path.home() / "momentum"))
    ).expanduser().resolve()


def profile_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "profile.yaml"


def store_dir(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "store"


def store_key_path(key: str, root: Path | None = None) -> Path:
    return store_dir(root) / f"{key}.json"


def load_profile(root: Path | None = None) -> Profile:
    """Load profile.yaml; unreadable or invalid files yield defaults."""
    try:
        return Profile.from_dict(read_yaml(profile_path(root)))
    except Exception:
        return Profile()


def get_user_timezone(root: Path | None = None) -> ZoneInfo:
    """Get user's timezone from profile.yaml, defaulting to UTC."""
    try:
        return ZoneInfo(load_profile(root).timezone)
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo("UTC")


def init_workspace(root: Path | None = None) -> Path:
    """Create the workspace layout and a default profile if missing."""
    if root is None:
        root = workspace_root()
    store_dir(root).mkdir(parents=True, exist_ok=True)
    path = profile_path(root)
    if not path.exists():
        write_yaml_atomic(path, Profile().to_dict())
    return root
