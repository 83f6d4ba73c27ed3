"""Clubhouse CLI - daily checklist and game calendar."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.supabase_rest import SupabaseError
from .config import Config, ConfigError, load_config
from .core.checklist import DayChecklist, format_checklist_sections
from .core.dates import iter_days
from .core.games import DayClassification
from .core.timeofday import MalformedTimeError, to_12_hour
from .workflows import build_calendar, build_checklist, list_series, toggle_task

EXPECTED_ERRORS = (SupabaseError, ConfigError, MalformedTimeError)

GAME_TYPE_MARKERS = {
    DayClassification.HOME: "H",
    DayClassification.AWAY: "A",
    DayClassification.BOTH: "B",
}


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _load_config() -> Config:
    try:
        return load_config()
    except ConfigError as e:
        _fail(e)


def _parse_date(value: str | None) -> date:
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}")


@click.group()
@click.version_option(package_name="clubhouse")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Clubhouse - game-day checklist for team staff."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _checklist_json(data: DayChecklist) -> dict:
    def task(t):
        return {
            "id": t.id,
            "title": t.title,
            "time": t.time,
            "category": t.category.value,
            "color": t.category.color,
            "completed": t.completed,
            "recurring": t.key.is_recurring,
        }

    return {
        "date": data.date.isoformat(),
        "classification": data.classification.value,
        "game_time": data.game_time,
        "tasks": [task(t) for t in data.tasks],
        "morning": [t.id for t in data.buckets.morning],
        "pregame": [t.id for t in data.buckets.pregame],
        "postgame": [t.id for t in data.buckets.postgame],
        "completed": data.completed_count,
        "percent_complete": round(data.percent_complete),
    }


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to view (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def checklist(target_date: str | None, as_json: bool):
    """Show the checklist for a day."""
    target = _parse_date(target_date)
    config = _load_config()
    try:
        data = build_checklist(config, target)
    except EXPECTED_ERRORS as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(_checklist_json(data), indent=2))
        return

    sections = format_checklist_sections(data)
    click.echo(sections["header"])
    click.echo(sections["progress"])
    if data.is_game_day:
        click.echo(f"\n### Morning / Pre-Arrival\n{sections['morning']}")
        click.echo(f"\n### Pre-Game\n{sections['pregame']}")
        click.echo(f"\n### Post-Game\n{sections['postgame']}")
    else:
        click.echo(f"\n### Tasks\n{sections['tasks']}")


@main.command()
@click.argument("task_id")
@click.option("--date", "-d", "target_date", default=None,
              help="Date of the checklist (YYYY-MM-DD), defaults to today")
def toggle(task_id: str, target_date: str | None):
    """Mark a task done (or not done) on a day's checklist."""
    target = _parse_date(target_date)
    config = _load_config()
    try:
        done = toggle_task(config, task_id, target)
    except KeyError as e:
        _fail(e.args[0])
    except EXPECTED_ERRORS as e:
        _fail(e)

    click.echo(f"✓ {task_id} marked {'done' if done else 'not done'}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def calendar(as_json: bool):
    """Show game days and task counts from last month to next month."""
    config = _load_config()
    try:
        data = build_calendar(config)
    except EXPECTED_ERRORS as e:
        _fail(e)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "start": data.start.isoformat(),
                    "end": data.end.isoformat(),
                    "game_types": {d.isoformat(): k.value for d, k in data.game_types.items()},
                    "task_counts": {d.isoformat(): n for d, n in data.task_counts.items()},
                },
                indent=2,
            )
        )
        return

    current_month = None
    for day in iter_days(data.start, data.end):
        if (day.year, day.month) != current_month:
            if current_month is not None:
                click.echo()
            click.echo(f"### {day.strftime('%B %Y')}")
            current_month = (day.year, day.month)

        marker = GAME_TYPE_MARKERS.get(data.game_types.get(day), " ")
        count = data.task_counts.get(day, 0)
        if marker.strip() or count:
            click.echo(f"  {day.strftime('%a %d')}  [{marker}] {count} task(s)")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def games(as_json: bool):
    """List the team's game series."""
    config = _load_config()
    try:
        team, series = list_series(config)
    except EXPECTED_ERRORS as e:
        _fail(e)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "id": s.id,
                        "home_team": s.home_team,
                        "visiting_team": s.visiting_team,
                        "games": [
                            {"date": g.date.isoformat(), "time": g.time, "game_number": g.game_number}
                            for g in s.games
                        ],
                    }
                    for s in series
                ],
                indent=2,
            )
        )
        return

    if not series:
        click.echo("No games scheduled.")
        return

    for s in series:
        where = "home" if s.home_team == team else "away"
        click.echo(f"{s.visiting_team} @ {s.home_team} ({len(s.games)} games, {where})")
        for g in s.games:
            time_str = to_12_hour(g.time) if g.time else "TBD"
            click.echo(f"  Game {g.game_number}: {g.date.strftime('%a, %b %d')} {time_str}")


@main.command()
def status():
    """Quick status check (today's game + checklist progress)."""
    config = _load_config()
    try:
        data = build_checklist(config)
    except EXPECTED_ERRORS as e:
        _fail(e)

    sections = format_checklist_sections(data)
    click.echo(sections["header"])
    click.echo(f"Checklist: {sections['progress']}")
    remaining = [t for t in data.tasks if not t.completed][:5]
    if remaining:
        click.echo("Next up:")
        for t in remaining:
            click.echo(f"  {to_12_hour(t.time):>8} {t.title}")


if __name__ == "__main__":
    main()
