"""Ports - interfaces/protocols for external dependencies."""

from .game_repo import GameRepository
from .task_repo import TaskRepository
from .completion_store import CompletionStore

__all__ = [
    "GameRepository",
    "TaskRepository",
    "CompletionStore",
]
