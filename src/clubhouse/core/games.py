"""Pure game schedule logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum

from .dates import iter_days, normalize_day, parse_day, same_day
from .timeofday import to_24_hour, to_minutes

SERIES_LENGTHS = (3, 6)


class DayClassification(Enum):
    """What kind of game day a date is for a team."""

    NONE = "none"
    HOME = "home"
    AWAY = "away"
    BOTH = "both"


@dataclass
class Game:
    """A single game within a series."""

    id: str
    date: date
    time: str | None = None
    game_number: int = 1


@dataclass
class GameSeries:
    """A run of consecutive games between the same home and visiting teams."""

    id: str
    home_team: str
    visiting_team: str
    games: list[Game] = field(default_factory=list)

    def involves(self, team: str | None) -> bool:
        return bool(team) and team in (self.home_team, self.visiting_team)

    @property
    def start_date(self) -> date | None:
        return self.games[0].date if self.games else None


@dataclass(frozen=True)
class GameDay:
    """Home/away flags for a team on a date."""

    home: bool = False
    away: bool = False

    @property
    def is_game_day(self) -> bool:
        return self.home or self.away

    @property
    def classification(self) -> DayClassification:
        if self.home and self.away:
            return DayClassification.BOTH
        if self.home:
            return DayClassification.HOME
        if self.away:
            return DayClassification.AWAY
        return DayClassification.NONE


def classify(
    target: date | datetime,
    team: str | None,
    series: list[GameSeries] | None,
) -> GameDay:
    """
    Determine whether the team plays at home, away, or both on a date.

    Every matching game contributes, so a team appearing in several series on
    the same day is reported as both. No team or no series means no game.
    Pure function - no I/O.
    """
    if not team or not series:
        return GameDay()

    home = False
    away = False
    for s in series:
        for game in s.games:
            if not same_day(game.date, target):
                continue
            if s.home_team == team:
                home = True
            if s.visiting_team == team:
                away = True

    return GameDay(home=home, away=away)


def is_game_day(
    target: date | datetime,
    team: str | None,
    series: list[GameSeries] | None,
) -> bool:
    """True if the team has any game (home or away) on the date."""
    return classify(target, team, series).is_game_day


def games_for_date(
    target: date | datetime,
    team: str | None,
    series: list[GameSeries] | None,
) -> list[tuple[GameSeries, Game]]:
    """All (series, game) pairs involving the team on a date."""
    if not team or not series:
        return []
    return [
        (s, game)
        for s in series
        if s.involves(team)
        for game in s.games
        if same_day(game.date, target)
    ]


def game_time_for_date(
    target: date | datetime,
    team: str | None,
    series: list[GameSeries] | None,
) -> str | None:
    """
    Start time ("HH:MM") of the team's game on a date.

    When several games are recorded for the day, the earliest start wins.
    Returns None when no game on that day has a recorded time.
    """
    times = [game.time for _, game in games_for_date(target, team, series) if game.time]
    if not times:
        return None
    return to_24_hour(min(times, key=to_minutes))


def game_types_for_range(
    start: date,
    end: date,
    team: str | None,
    series: list[GameSeries] | None,
) -> dict[date, DayClassification]:
    """
    Classify each day in a range, omitting days without a game.

    Pure function - no I/O.
    """
    if not team or not series:
        return {}

    result = {}
    for day in iter_days(start, end):
        kind = classify(day, team, series).classification
        if kind is not DayClassification.NONE:
            result[day] = kind
    return result


def build_series(
    home_team: str,
    visiting_team: str,
    start: date,
    length: int = 3,
    times: list[str | None] | None = None,
    series_id: str = "",
) -> GameSeries:
    """
    Create a series of games on consecutive days starting at `start`.

    Raises ValueError if length is not 3 or 6 or the teams are missing.
    """
    if length not in SERIES_LENGTHS:
        raise ValueError(f"Series length must be one of {SERIES_LENGTHS}, got {length}")
    if not home_team or not visiting_team:
        raise ValueError("Series needs both a home and a visiting team")

    times = times or []
    start = normalize_day(start)
    series_id = series_id or f"series-{home_team}-{visiting_team}-{start.isoformat()}"

    games = []
    for i in range(length):
        game_time = times[i] if i < len(times) else None
        games.append(
            Game(
                id=f"{series_id}-{i + 1}",
                date=start + timedelta(days=i),
                time=to_24_hour(game_time) if game_time else None,
                game_number=i + 1,
            )
        )

    return GameSeries(
        id=series_id,
        home_team=home_team,
        visiting_team=visiting_team,
        games=games,
    )


def group_games_into_series(rows: list[dict]) -> list[GameSeries]:
    """
    Group database game rows into series.

    Rows need `id`, `date`, optional `time` and the team names under
    `home_team_name`/`away_team_name` (falling back to "Team <id>"). Games
    are grouped by the ordered (home, away) pair; a gap of more than one
    day between games starts a new series. Rows without a date are skipped.
    Pure function - no I/O.
    """
    parsed = []
    for row in rows:
        if not row.get("date"):
            continue
        home = row.get("home_team_name") or f"Team {row.get('home_team_id')}"
        away = row.get("away_team_name") or f"Team {row.get('away_team_id')}"
        game_date = parse_day(row["date"])
        parsed.append((game_date, home, away, row))

    parsed.sort(key=lambda p: p[0])

    open_series: dict[tuple[str, str], GameSeries] = {}
    result: list[GameSeries] = []

    for game_date, home, away, row in parsed:
        key = (home, away)
        current = open_series.get(key)
        if current is None or (game_date - current.games[-1].date).days > 1:
            current = GameSeries(
                id=f"series-{row['id']}",
                home_team=home,
                visiting_team=away,
            )
            open_series[key] = current
            result.append(current)

        current.games.append(
            Game(
                id=str(row["id"]),
                date=game_date,
                time=row.get("time") or None,
                game_number=len(current.games) + 1,
            )
        )

    return result
