"""
Zeph - tuning constants for the Zeph role-playing game.

This package provides the game's fixed configuration table (map size,
level caps, experience curves, regen and attack timing, gameplay limits)
together with the small helpers that turn those constants into experience
tables, attribute points and timing checks.
"""

__version__ = "1.0.0"
__author__ = "Zeph Developers"

from zeph.config.game_config import CONFIG, GameConfig, ProgressionTrack

__all__ = ["CONFIG", "GameConfig", "ProgressionTrack"]
