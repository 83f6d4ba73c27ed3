"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .categories import TaskCategory, category_from_db
from .dates import normalize_day, parse_day, same_day
from .timeofday import to_12_hour, to_24_hour, to_minutes

# ScheduledTask.task_type values
GAME_DAYS_ONLY = 1
OFF_DAYS_ONLY = 2

DEFAULT_TASK_TIME = "09:00"

# {iso_date: {task_id: completed}}
CompletionMap = dict[str, dict[str, bool]]


class RecurringTag(Enum):
    """Which kind of day a recurring task repeats on."""

    GAME_DAY = "game-day"
    OFF_DAY = "off-day"

    @classmethod
    def for_day(cls, game_day: bool) -> "RecurringTag":
        return cls.GAME_DAY if game_day else cls.OFF_DAY


@dataclass(frozen=True)
class TaskKey:
    """
    Identity of a task occurrence on a given day.

    Recurring occurrences are keyed per day so each day tracks its own
    completion; one-off tasks are keyed by their own id.
    """

    kind: str
    task_id: str
    day: date

    RECURRING = "recurring"
    SCHEDULED = "task"

    @classmethod
    def recurring(cls, task_id: str, day: date | datetime) -> "TaskKey":
        return cls(cls.RECURRING, str(task_id), normalize_day(day))

    @classmethod
    def scheduled(cls, task_id: str, day: date | datetime) -> "TaskKey":
        return cls(cls.SCHEDULED, str(task_id), normalize_day(day))

    @property
    def is_recurring(self) -> bool:
        return self.kind == self.RECURRING

    def __str__(self) -> str:
        if self.is_recurring:
            return f"recurring-{self.task_id}-{self.day.isoformat()}"
        return self.task_id


@dataclass
class RecurringTaskDef:
    """A task that repeats on every game day or every off day."""

    id: str
    title: str
    tag: RecurringTag
    time: str
    category: TaskCategory = TaskCategory.SANITATION
    description: str = ""
    enabled: bool = True

    @classmethod
    def from_row(cls, data: dict) -> "RecurringTaskDef":
        """Create from a database task row with is_repeating set."""
        tag = RecurringTag.OFF_DAY if data.get("repeating_day") == 0 else RecurringTag.GAME_DAY
        return cls(
            id=str(data["id"]),
            title=data.get("task_name") or "",
            description=data.get("task_description") or "",
            category=category_from_db(data.get("task_category")),
            tag=tag,
            time=to_12_hour(data.get("task_time") or DEFAULT_TASK_TIME),
        )


@dataclass
class ScheduledTask:
    """A one-off task scheduled for a specific day."""

    id: str
    title: str
    date: date
    time: str
    category: TaskCategory = TaskCategory.SANITATION
    description: str = ""
    completed: bool = False
    task_type: int | None = None

    @classmethod
    def from_row(cls, data: dict) -> "ScheduledTask":
        """Create from a database task row."""
        raw_date = data.get("task_date") or data.get("created_at")
        return cls(
            id=str(data["id"]),
            title=data.get("task_name") or "",
            description=data.get("task_description") or "",
            category=category_from_db(data.get("task_category")),
            date=parse_day(raw_date),
            time=data.get("task_time") or DEFAULT_TASK_TIME,
            completed=bool(data.get("task_complete")),
            task_type=data.get("task_type") or None,
        )

    def to_instance(self) -> "TaskInstance":
        return TaskInstance(
            key=TaskKey.scheduled(self.id, self.date),
            title=self.title,
            description=self.description,
            category=self.category,
            time=to_24_hour(self.time),
            completed=self.completed,
        )


@dataclass
class TaskInstance:
    """A task materialised on a specific day."""

    key: TaskKey
    title: str
    time: str
    category: TaskCategory = TaskCategory.SANITATION
    description: str = ""
    completed: bool = False

    @property
    def id(self) -> str:
        return str(self.key)

    @property
    def date(self) -> date:
        return self.key.day

    @property
    def minutes(self) -> int:
        return to_minutes(self.time)


def is_completed(completions: CompletionMap, key: TaskKey) -> bool:
    """Completion flag for a key; missing entries are not completed."""
    return completions.get(key.day.isoformat(), {}).get(key.task_id, False)


def set_completion(completions: CompletionMap, key: TaskKey, value: bool) -> CompletionMap:
    """Return a copy of the map with one flag set."""
    day = key.day.isoformat()
    updated = {d: dict(flags) for d, flags in completions.items()}
    updated.setdefault(day, {})[key.task_id] = value
    return updated


def toggle_completion(completions: CompletionMap, key: TaskKey) -> CompletionMap:
    """Return a copy of the map with one flag flipped."""
    return set_completion(completions, key, not is_completed(completions, key))


def expand_recurring(
    defs: list[RecurringTaskDef],
    target: date | datetime,
    game_day: bool,
    completions: CompletionMap | None = None,
) -> list[TaskInstance]:
    """
    Materialise the recurring tasks that apply to a day.

    Only enabled definitions whose tag matches the day type are included, so
    game-day and off-day tasks never appear together. Times are converted to
    zero-padded 24-hour form and the result is sorted by time.

    Pure function - no I/O. Raises MalformedTimeError on an unparseable time.
    """
    completions = completions or {}
    wanted = RecurringTag.for_day(game_day)
    day = normalize_day(target)

    instances = []
    for rt in defs:
        if not rt.enabled or rt.tag is not wanted:
            continue
        key = TaskKey.recurring(rt.id, day)
        instances.append(
            TaskInstance(
                key=key,
                title=rt.title,
                description=rt.description,
                category=rt.category,
                time=to_24_hour(rt.time),
                completed=is_completed(completions, key),
            )
        )

    return sorted(instances, key=lambda t: t.time)


def filter_for_day(
    tasks: list[ScheduledTask],
    target: date | datetime,
    game_day: bool,
) -> list[ScheduledTask]:
    """
    Select the one-off tasks active on a day.

    Untagged tasks show up on every day; tagged ones only on game days (1)
    or off days (2). Order is not changed.
    Pure function - no I/O.
    """
    result = []
    for t in tasks:
        if not same_day(t.date, target):
            continue
        if t.task_type == GAME_DAYS_ONLY and not game_day:
            continue
        if t.task_type == OFF_DAYS_ONLY and game_day:
            continue
        result.append(t)
    return result


def sort_by_time(tasks: list[TaskInstance]) -> list[TaskInstance]:
    """Sort instances by time of day."""
    return sorted(tasks, key=lambda t: t.minutes)

