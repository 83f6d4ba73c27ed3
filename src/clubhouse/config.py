"""Configuration management for Clubhouse."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.timeofday import MalformedTimeError, to_24_hour

logger = logging.getLogger(__name__)

CLUBHOUSE_HOME = Path(os.environ.get("CLUBHOUSE_HOME", Path.home() / "clubhouse"))
CONFIG_FILE = CLUBHOUSE_HOME / "config" / "clubhouse.conf"
DATA_DIR = CLUBHOUSE_HOME / "data"


class ConfigError(Exception):
    """Raised when a config value cannot be used."""

    pass


@dataclass
class Config:
    """Clubhouse configuration."""

    supabase_url: str = ""
    supabase_anon_key: str = ""
    user_id: int | None = None
    team_id: int | None = None
    team_name: str = ""
    default_game_time: str = "19:00"
    completions_file: str = ""

    @property
    def completions_path(self) -> Path:
        if self.completions_file:
            return Path(self.completions_file).expanduser()
        return DATA_DIR / "completions.json"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_int(key: str, value: str) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{key.upper()} must be an integer, got {value!r}")


def load_config(config_file: Path | None = None) -> Config:
    """
    Load configuration from clubhouse.conf, then apply environment overrides.

    SUPABASE_URL and SUPABASE_ANON_KEY in the environment win over the file.
    """
    config = Config()
    config_file = config_file or CONFIG_FILE

    if config_file.exists():
        for line in config_file.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "supabase_url":
                    config.supabase_url = value.rstrip("/")
                case "supabase_anon_key":
                    config.supabase_anon_key = value
                case "user_id":
                    config.user_id = _parse_int(key, value)
                case "team_id":
                    config.team_id = _parse_int(key, value)
                case "team_name":
                    config.team_name = value
                case "default_game_time":
                    try:
                        config.default_game_time = to_24_hour(value)
                    except MalformedTimeError as e:
                        raise ConfigError(f"DEFAULT_GAME_TIME: {e}")
                case "completions_file":
                    config.completions_file = value
                case _:
                    logger.warning(f"Unknown config key: {key}")
    else:
        logger.debug(f"No config file at {config_file}, using defaults")

    if os.environ.get("SUPABASE_URL"):
        config.supabase_url = os.environ["SUPABASE_URL"].rstrip("/")
    if os.environ.get("SUPABASE_ANON_KEY"):
        config.supabase_anon_key = os.environ["SUPABASE_ANON_KEY"]

    return config
