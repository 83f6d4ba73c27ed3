"""Functional core - pure business logic with no I/O."""

from .dates import normalize_day, parse_day, same_day, iso_day, calendar_window
from .timeofday import MalformedTimeError, to_minutes, to_24_hour, to_12_hour
from .categories import TaskCategory, category_from_db
from .games import (
    DayClassification,
    Game,
    GameDay,
    GameSeries,
    build_series,
    classify,
    game_types_for_range,
    group_games_into_series,
    is_game_day,
)
from .tasks import (
    CompletionMap,
    RecurringTag,
    RecurringTaskDef,
    ScheduledTask,
    TaskInstance,
    TaskKey,
    expand_recurring,
    filter_for_day,
    is_completed,
    toggle_completion,
)
from .checklist import (
    DayChecklist,
    TimeBuckets,
    assemble_checklist,
    bucket_by_period,
    tasks_per_day,
)

__all__ = [
    # Dates
    "normalize_day",
    "parse_day",
    "same_day",
    "iso_day",
    "calendar_window",
    # Times
    "MalformedTimeError",
    "to_minutes",
    "to_24_hour",
    "to_12_hour",
    # Categories
    "TaskCategory",
    "category_from_db",
    # Games
    "DayClassification",
    "Game",
    "GameDay",
    "GameSeries",
    "build_series",
    "classify",
    "game_types_for_range",
    "group_games_into_series",
    "is_game_day",
    # Tasks
    "CompletionMap",
    "RecurringTag",
    "RecurringTaskDef",
    "ScheduledTask",
    "TaskInstance",
    "TaskKey",
    "expand_recurring",
    "filter_for_day",
    "is_completed",
    "toggle_completion",
    # Checklist
    "DayChecklist",
    "TimeBuckets",
    "assemble_checklist",
    "bucket_by_period",
    "tasks_per_day",
]
