"""Pure checklist assembly logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime

from .dates import iter_days, normalize_day
from .games import DayClassification, GameSeries, classify, game_time_for_date
from .tasks import (
    CompletionMap,
    RecurringTag,
    RecurringTaskDef,
    ScheduledTask,
    TaskInstance,
    expand_recurring,
    filter_for_day,
    sort_by_time,
)
from .timeofday import NOON_MINUTES, to_12_hour, to_minutes

DEFAULT_GAME_TIME = "19:00"


@dataclass
class TimeBuckets:
    """A game day's tasks split around noon and first pitch."""

    morning: list[TaskInstance] = field(default_factory=list)
    pregame: list[TaskInstance] = field(default_factory=list)
    postgame: list[TaskInstance] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.morning) + len(self.pregame) + len(self.postgame)


@dataclass
class DayChecklist:
    """Everything due on one day, ready for display."""

    date: date
    classification: DayClassification
    game_time: str | None
    scheduled: list[TaskInstance]
    recurring: list[TaskInstance]
    tasks: list[TaskInstance]
    buckets: TimeBuckets

    @property
    def is_game_day(self) -> bool:
        return self.classification is not DayClassification.NONE

    @property
    def completed_count(self) -> int:
        return completion_progress(self.tasks)[0]

    @property
    def percent_complete(self) -> float:
        return completion_progress(self.tasks)[2]


def bucket_by_period(
    tasks: list[TaskInstance],
    game_time: str | None,
    game_day: bool = True,
    default_game_time: str = DEFAULT_GAME_TIME,
) -> TimeBuckets:
    """
    Partition a game day's tasks into morning, pre-game and post-game.

    Before noon is morning, noon up to the game time is pre-game, and the
    game time onwards is post-game. Without a game time the default (19:00)
    is used. A game time at or before noon leaves pre-game empty. Off days
    get three empty buckets.

    Pure function - no I/O.
    """
    if not game_day:
        return TimeBuckets()

    cutoff = to_minutes(game_time or default_game_time)
    buckets = TimeBuckets()

    for task in tasks:
        mins = task.minutes
        if mins < NOON_MINUTES:
            buckets.morning.append(task)
        elif mins < cutoff:
            buckets.pregame.append(task)
        else:
            buckets.postgame.append(task)

    buckets.morning = sort_by_time(buckets.morning)
    buckets.pregame = sort_by_time(buckets.pregame)
    buckets.postgame = sort_by_time(buckets.postgame)
    return buckets


def completion_progress(tasks: list[TaskInstance]) -> tuple[int, int, float]:
    """(completed, total, percent) for a task list; 0% when empty."""
    total = len(tasks)
    done = sum(1 for t in tasks if t.completed)
    percent = (done / total) * 100 if total else 0.0
    return done, total, percent


def assemble_checklist(
    tasks: list[ScheduledTask],
    recurring: list[RecurringTaskDef],
    series: list[GameSeries],
    team: str | None,
    completions: CompletionMap | None = None,
    as_of: date | datetime | None = None,
    default_game_time: str = DEFAULT_GAME_TIME,
) -> DayChecklist:
    """
    Build the checklist for one day from raw tasks and games.

    A day with both a home and an away game is treated as a single game day:
    its tasks are listed once and the earliest game time sets the cutoff.

    Pure function - no I/O.
    """
    today = normalize_day(as_of or date.today())

    game_day = classify(today, team, series)
    game_time = game_time_for_date(today, team, series) if game_day.is_game_day else None

    scheduled = [t.to_instance() for t in filter_for_day(tasks, today, game_day.is_game_day)]
    expanded = expand_recurring(recurring, today, game_day.is_game_day, completions)
    combined = sort_by_time(scheduled + expanded)

    return DayChecklist(
        date=today,
        classification=game_day.classification,
        game_time=game_time,
        scheduled=sort_by_time(scheduled),
        recurring=expanded,
        tasks=combined,
        buckets=bucket_by_period(
            combined,
            game_time,
            game_day=game_day.is_game_day,
            default_game_time=default_game_time,
        ),
    )


def tasks_per_day(
    tasks: list[ScheduledTask],
    recurring: list[RecurringTaskDef],
    series: list[GameSeries],
    team: str | None,
    start: date,
    end: date,
) -> dict[date, int]:
    """
    Count the tasks due on each day of a range, omitting empty days.

    Pure function - no I/O.
    """
    counts = {}
    for day in iter_days(start, end):
        game_day = classify(day, team, series).is_game_day
        total = len(filter_for_day(tasks, day, game_day))
        wanted = RecurringTag.for_day(game_day)
        total += sum(1 for rt in recurring if rt.enabled and rt.tag is wanted)
        if total:
            counts[day] = total
    return counts


def format_task_line(task: TaskInstance) -> str:
    """
    Format a single task for display.

    Pure function - no I/O.
    """
    check = "x" if task.completed else " "
    recurring = " (recurring)" if task.key.is_recurring else ""
    return f"- [{check}] {to_12_hour(task.time):>8} {task.title} [{task.category.label}]{recurring}"


def format_checklist_sections(data: DayChecklist) -> dict[str, str]:
    """
    Format a checklist into plain-text sections.

    Returns dict with keys: header, progress, and either morning/pregame/
    postgame (game days) or tasks (off days).
    Pure function - no I/O.
    """
    kind = {
        DayClassification.HOME: "Home game day",
        DayClassification.AWAY: "Away game day",
        DayClassification.BOTH: "Game day (home and away recorded)",
        DayClassification.NONE: "Off day",
    }[data.classification]

    header = f"{data.date.strftime('%A, %B %d')} - {kind}"
    if data.is_game_day:
        header += f" (first pitch {to_12_hour(data.game_time) if data.game_time else 'TBD'})"

    done, total, percent = completion_progress(data.tasks)
    sections = {
        "header": header,
        "progress": f"{done} / {total} complete ({round(percent)}%)",
    }

    def _lines(items: list[TaskInstance]) -> str:
        return "\n".join(format_task_line(t) for t in items) or "None"

    if data.is_game_day:
        sections["morning"] = _lines(data.buckets.morning)
        sections["pregame"] = _lines(data.buckets.pregame)
        sections["postgame"] = _lines(data.buckets.postgame)
    else:
        sections["tasks"] = _lines(data.tasks)

    return sections
