"""Supabase REST adapter - HTTP client for games and tasks."""

import logging

import requests

from clubhouse.config import Config, load_config
from clubhouse.core.games import GameSeries, group_games_into_series
from clubhouse.core.tasks import RecurringTaskDef, ScheduledTask

logger = logging.getLogger(__name__)

REST_PATH = "/rest/v1"
TIMEOUT_SECONDS = 15


class SupabaseError(Exception):
    """Raised when the database API is unreachable or rejects a request."""

    pass


class SupabaseAdapter:
    """
    Supabase (PostgREST) adapter.

    Implements GameRepository and TaskRepository protocols. Maps rows to
    core dataclasses. No business logic - just I/O.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        if not self.config.supabase_url or not self.config.supabase_anon_key:
            raise SupabaseError(
                "Missing Supabase credentials. Set SUPABASE_URL and SUPABASE_ANON_KEY "
                "in config/clubhouse.conf or the environment."
            )
        self._base = f"{self.config.supabase_url}{REST_PATH}"
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "apikey": self.config.supabase_anon_key,
                "Authorization": f"Bearer {self.config.supabase_anon_key}",
            }
        )

    def _api_request(
        self,
        method: str,
        table: str,
        params: dict | None = None,
        json: dict | None = None,
    ) -> list[dict]:
        """Make a REST request against a table and return the rows."""
        url = f"{self._base}/{table}"
        headers = {"Prefer": "return=representation"} if json is not None else None
        logger.debug(f"{method} {url} {params}")

        try:
            resp = self._session.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=TIMEOUT_SECONDS,
            )
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise SupabaseError(f"{method} {table} failed: {e.response.status_code} {e.response.text}")
        except requests.RequestException as e:
            raise SupabaseError(f"{method} {table} failed: {e}")

        if not resp.content:
            return []
        return resp.json()

    def _fetch_task_rows(self, user_id: int) -> list[dict]:
        return self._api_request(
            "GET",
            "task",
            params={"user_id": f"eq.{user_id}", "order": "created_at.desc"},
        )

    def _team_names(self, team_ids: set[int]) -> dict[int, str]:
        """Look up team names by id."""
        if not team_ids:
            return {}
        ids = ",".join(str(i) for i in sorted(team_ids))
        rows = self._api_request(
            "GET",
            "teams",
            params={"select": "id,team_name", "id": f"in.({ids})"},
        )
        return {row["id"]: row["team_name"] for row in rows}

    def fetch_game_rows(self, team_id: int) -> list[dict]:
        """Fetch the team's games with home/away team names attached."""
        rows = self._api_request(
            "GET",
            "games",
            params={
                "or": f"(home_team_id.eq.{team_id},away_team_id.eq.{team_id})",
                "order": "date.asc,time.asc",
            },
        )

        team_ids = set()
        for row in rows:
            team_ids.add(row["home_team_id"])
            team_ids.add(row["away_team_id"])
        names = self._team_names(team_ids)

        for row in rows:
            row["home_team_name"] = names.get(row["home_team_id"])
            row["away_team_name"] = names.get(row["away_team_id"])
        return rows

    def fetch_series(self, team_id: int) -> list[GameSeries]:
        """Fetch the team's games grouped into series."""
        return group_games_into_series(self.fetch_game_rows(team_id))

    def fetch_team_name(self, team_id: int) -> str | None:
        """Look up a team's display name."""
        return self._team_names({team_id}).get(team_id)

    def fetch_tasks(self, user_id: int) -> tuple[list[ScheduledTask], list[RecurringTaskDef]]:
        """Fetch one-off and recurring tasks with a single request."""
        rows = self._fetch_task_rows(user_id)
        scheduled = [ScheduledTask.from_row(row) for row in rows if not row.get("is_repeating")]
        recurring = [RecurringTaskDef.from_row(row) for row in rows if row.get("is_repeating")]
        return scheduled, recurring

    def set_complete(self, task_id: str, completed: bool) -> None:
        """Set a one-off task's completion flag."""
        rows = self._api_request(
            "PATCH",
            "task",
            params={"id": f"eq.{task_id}"},
            json={"task_complete": completed},
        )
        if not rows:
            raise SupabaseError(f"Task {task_id} not found")
