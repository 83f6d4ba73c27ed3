"""File-based completion storage adapter."""

import json
import logging
from pathlib import Path

from clubhouse.core.tasks import CompletionMap, TaskKey, is_completed, set_completion

logger = logging.getLogger(__name__)


class FileCompletionStore:
    """
    File-based completion storage.

    Implements CompletionStore protocol. All completions live in one JSON
    file shaped {iso_date: {task_id: completed}}.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> CompletionMap:
        """Load completions. Returns an empty map if the file is missing or unreadable."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable completions file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed completions file {self.path}")
            return {}
        return {
            day: {str(task_id): bool(done) for task_id, done in flags.items()}
            for day, flags in data.items()
            if isinstance(flags, dict)
        }

    def save(self, completions: CompletionMap) -> None:
        """Write all completions, dropping days with nothing completed."""
        pruned = {
            day: {task_id: True for task_id, done in flags.items() if done}
            for day, flags in completions.items()
        }
        pruned = {day: flags for day, flags in pruned.items() if flags}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(pruned, indent=2, sort_keys=True))

    def is_completed(self, key: TaskKey) -> bool:
        return is_completed(self.load(), key)

    def set(self, key: TaskKey, completed: bool) -> None:
        """Set one completion flag and persist it."""
        self.save(set_completion(self.load(), key, completed))

    def toggle(self, key: TaskKey) -> bool:
        """Flip a completion flag and persist it. Returns the new value."""
        value = not self.is_completed(key)
        self.set(key, value)
        return value
