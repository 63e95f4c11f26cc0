"""Attribute and level bounds derived from the progression caps."""

from numbers import Integral

from zeph.config.game_config import CONFIG, ProgressionTrack


def attribute_points_for_level(level, config=CONFIG):
    """
    Total attribute points granted for reaching a base level.

    A character starts at level 1 with no points and earns
    ATTRIBUTE_POINTS_PER_LEVEL on every base level up.

    Args:
        level: Base level, 1 to MAX_LEVEL_BASE
        config: GameConfig to read constants from

    Returns:
        Number of attribute points (int)

    Raises:
        ValueError: If level is not an integer in 1..MAX_LEVEL_BASE
    """
    if not isinstance(level, Integral) or not 1 <= level <= config.max_level_base:
        raise ValueError(f"Base level {level!r} out of range (expected 1 to {config.max_level_base})")
    return (level - 1) * config.attribute_points_per_level


def clamp_attribute(value, config=CONFIG):
    """Clamp an attribute value into [0, MAX_ATTRIBUTE]."""
    return max(0, min(config.max_attribute, value))


def clamp_level(level, track=ProgressionTrack.BASE, config=CONFIG):
    """Clamp a level into [1, cap] for the given track."""
    return max(1, min(config.max_level(track), level))
