"""Completion storage interface."""

from typing import Protocol

from clubhouse.core.tasks import CompletionMap, TaskKey


class CompletionStore(Protocol):
    """Interface for reading and writing recurring-task completions."""

    def load(self) -> CompletionMap:
        """Load all completions. Returns an empty map if none are stored."""
        ...

    def toggle(self, key: TaskKey) -> bool:
        """Flip a completion flag and persist it. Returns the new value."""
        ...
