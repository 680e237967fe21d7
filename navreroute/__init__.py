"""Reroute request realignment for turn-by-turn navigation."""

__version__ = "1.0.0"
