"""Shared workflow layer between the CLI and the data sources.

Each function fetches what it needs through the ports, runs the pure core,
and returns plain results for display.
"""

import logging
from dataclasses import dataclass
from datetime import date

from .adapters.file_completions import FileCompletionStore
from .adapters.supabase_rest import SupabaseAdapter
from .config import Config, ConfigError
from .core.checklist import DayChecklist, assemble_checklist, tasks_per_day
from .core.dates import calendar_window
from .core.games import DayClassification, GameSeries, game_types_for_range
from .ports import CompletionStore, GameRepository, TaskRepository

logger = logging.getLogger(__name__)


def get_completion_store(config: Config) -> FileCompletionStore:
    """Resolve the completion file from config."""
    return FileCompletionStore(config.completions_path)


def get_repository(config: Config) -> SupabaseAdapter:
    """Build the database adapter from config."""
    return SupabaseAdapter(config)


def _resolve_repos(
    config: Config,
    tasks: TaskRepository | None,
    games: GameRepository | None,
) -> tuple[TaskRepository, GameRepository]:
    """Fill in missing repositories with one shared database adapter."""
    if tasks is None or games is None:
        adapter = get_repository(config)
        tasks = tasks or adapter
        games = games or adapter
    return tasks, games


def _require_user(config: Config) -> int:
    if config.user_id is None:
        raise ConfigError("USER_ID is not set in clubhouse.conf")
    return config.user_id


def fetch_series(config: Config, games: GameRepository) -> list[GameSeries]:
    """Fetch the team's series, or none when no team is configured."""
    if config.team_id is None:
        logger.info("No TEAM_ID configured; every day is an off day")
        return []
    return games.fetch_series(config.team_id)


def resolve_team(config: Config, games: GameRepository) -> str | None:
    """
    Name of the team whose games drive classification.

    TEAM_NAME overrides the lookup; otherwise the name comes from the
    team record for TEAM_ID.
    """
    if config.team_name:
        return config.team_name
    if config.team_id is None:
        return None
    name = games.fetch_team_name(config.team_id)
    if name is None:
        logger.warning(f"Team {config.team_id} not found; every day is an off day")
    return name


def load_schedule(config: Config, games: GameRepository) -> tuple[str | None, list[GameSeries]]:
    """Fetch the series and the team name they should be classified against."""
    series = fetch_series(config, games)
    if not series:
        return config.team_name or None, series

    team = resolve_team(config, games)
    if team and not any(s.involves(team) for s in series):
        logger.warning(
            f"None of the {len(series)} series fetched for team {config.team_id} involve {team!r}; "
            "check TEAM_NAME"
        )
    return team, series


def build_checklist(
    config: Config,
    target: date | None = None,
    tasks: TaskRepository | None = None,
    games: GameRepository | None = None,
    store: CompletionStore | None = None,
) -> DayChecklist:
    """Fetch tasks, games and completions and assemble a day's checklist."""
    user_id = _require_user(config)
    tasks, games = _resolve_repos(config, tasks, games)
    store = store or get_completion_store(config)
    target = target or date.today()

    scheduled, recurring = tasks.fetch_tasks(user_id)
    team, series = load_schedule(config, games)
    logger.debug(
        f"Loaded {len(scheduled)} tasks, {len(recurring)} recurring, {len(series)} series"
    )

    return assemble_checklist(
        tasks=scheduled,
        recurring=recurring,
        series=series,
        team=team,
        completions=store.load(),
        as_of=target,
        default_game_time=config.default_game_time,
    )


def toggle_task(
    config: Config,
    task_id: str,
    target: date | None = None,
    tasks: TaskRepository | None = None,
    games: GameRepository | None = None,
    store: CompletionStore | None = None,
) -> bool:
    """
    Flip the completion of a task on a day's checklist.

    `task_id` is the id shown on the checklist. Recurring occurrences are
    stored in the completion file; one-off tasks are updated in the database.
    Returns the new completion value. Raises KeyError if the task is not on
    that day's checklist.
    """
    tasks, games = _resolve_repos(config, tasks, games)
    store = store or get_completion_store(config)
    checklist = build_checklist(config, target, tasks=tasks, games=games, store=store)

    instance = next((t for t in checklist.tasks if t.id == task_id), None)
    if instance is None:
        raise KeyError(f"No task {task_id!r} on {checklist.date.isoformat()}")

    if instance.key.is_recurring:
        value = store.toggle(instance.key)
    else:
        value = not instance.completed
        tasks.set_complete(instance.key.task_id, value)

    logger.info(f"Task {task_id} on {checklist.date} marked {'done' if value else 'not done'}")
    return value


@dataclass
class CalendarData:
    """Game types and task counts for the calendar window."""

    start: date
    end: date
    game_types: dict[date, DayClassification]
    task_counts: dict[date, int]


def build_calendar(
    config: Config,
    today: date | None = None,
    tasks: TaskRepository | None = None,
    games: GameRepository | None = None,
) -> CalendarData:
    """Classify and count tasks for every day from last month to next month."""
    user_id = _require_user(config)
    tasks, games = _resolve_repos(config, tasks, games)
    start, end = calendar_window(today or date.today())

    scheduled, recurring = tasks.fetch_tasks(user_id)
    team, series = load_schedule(config, games)

    return CalendarData(
        start=start,
        end=end,
        game_types=game_types_for_range(start, end, team, series),
        task_counts=tasks_per_day(scheduled, recurring, series, team, start, end),
    )


def list_series(
    config: Config, games: GameRepository | None = None
) -> tuple[str | None, list[GameSeries]]:
    """Fetch the team name and its series sorted by start date."""
    games = games or get_repository(config)
    team, series = load_schedule(config, games)
    return team, sorted(series, key=lambda s: s.start_date or date.min)

