"""Clubhouse - game-day checklist tooling for team staff."""

__version__ = "0.1.0"
