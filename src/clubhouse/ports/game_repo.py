"""Game repository interface."""

from typing import Protocol

from clubhouse.core.games import GameSeries


class GameRepository(Protocol):
    """Interface for fetching a team's game schedule from any backend."""

    def fetch_series(self, team_id: int) -> list[GameSeries]:
        """Fetch all series the team plays in (home or away)."""
        ...

    def fetch_team_name(self, team_id: int) -> str | None:
        """Look up a team's display name, or None if the team is unknown."""
        ...
