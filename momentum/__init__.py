"""Momentum core library: habits, weekly schedule, points and persistence.

Public API re-exports for convenient imports:
    from momentum import open_store, StateStore, completion_percent, ...
"""

# Workspace & paths
from momentum.workspace import (
    workspace_root,
    profile_path,
    store_dir,
    store_key_path,
    load_profile,
    get_user_timezone,
    init_workspace,
)

# File I/O
from momentum.fileio import (
    read_text,
    read_json,
    read_yaml,
    write_json_atomic,
    write_yaml_atomic,
)

# Logging
from momentum.logs import setup_logging

# Clock
from momentum.clock import SystemClock, FixedClock

# Persistence
from momentum.storage import (
    STORAGE_KEYS,
    Storage,
    FileStorage,
    MemoryStorage,
    NullStorage,
    select_storage,
)

# Models
from momentum.models import (
    DAY_NAMES,
    PAGES,
    POINTS_PER_COMPLETION,
    DEFAULT_TASK_ICON,
    Habit,
    Task,
    WeeklySchedule,
    Progress,
    ViewState,
    Profile,
    default_habits,
)

# Completion
from momentum.completion import (
    completion_percent,
    day_index,
    day_name,
    today_name,
    reward_unlocked,
    reward_gap,
    habits_completed,
    habits_remaining,
)

# Weekly grid
from momentum.grid import (
    GRID_HOURS,
    parse_time,
    normalize_time,
    hour_label,
    task_hour,
    tasks_at,
    unscheduled_tasks,
    week_grid,
)

# Achievements
from momentum.achievements import Achievement, list_achievements, stats_tiles

# State store
from momentum.store import StateStore, open_store, decline
