"""Game configuration module - centralized storage for all tuning constants."""

from zeph.config.game_config import (
    CONFIG,
    GameConfig,
    ProgressionTrack,
    get_game_config,
    print_config,
)

__all__ = ['CONFIG', 'GameConfig', 'ProgressionTrack', 'get_game_config', 'print_config']
