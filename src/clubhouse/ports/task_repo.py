"""Task repository interface."""

from typing import Protocol

from clubhouse.core.tasks import RecurringTaskDef, ScheduledTask


class TaskRepository(Protocol):
    """Interface for fetching and updating tasks from any backend."""

    def fetch_tasks(self, user_id: int) -> tuple[list[ScheduledTask], list[RecurringTaskDef]]:
        """Fetch one-off and recurring tasks together."""
        ...

    def set_complete(self, task_id: str, completed: bool) -> None:
        """Set a one-off task's completion flag."""
        ...
