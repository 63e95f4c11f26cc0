"""Attack timing - attack readiness from ASPD and attack interval bounds."""

import math

from zeph.config.game_config import CONFIG

# Frames between basic attacks at zero ASPD
BASE_ATTACK_TICKS = 50


def attack_tick_threshold(aspd):
    """
    Number of update ticks a character must wait between basic attacks.

    Higher ASPD shortens the wait: 100 ASPD halves it. At -100 ASPD or
    below the wait is infinite and the character never becomes ready.

    Args:
        aspd: Total attack speed stat

    Returns:
        Tick threshold (float, math.inf when aspd <= -100)
    """
    speed = 1 + aspd / 100.0
    if speed <= 0:
        return math.inf
    return BASE_ATTACK_TICKS / speed


def can_attack(instance):
    """
    Check if a character is ready to perform a basic attack.

    Args:
        instance: Character with atk_tick and aspd

    Returns:
        True if enough ticks have passed, False otherwise
    """
    return instance.atk_tick >= attack_tick_threshold(instance.aspd)


def update_attack_tick(instance):
    """Advance the attack tick of a character that cannot attack yet."""
    if not can_attack(instance):
        instance.atk_tick += 1


def reset_attack_tick(instance):
    """Reset the attack tick after an attack."""
    instance.atk_tick = 0


def clamp_attack_interval(interval, config=CONFIG):
    """
    Clamp an attack cooldown in seconds to [0, SLOWEST_ATTACK_INTERVAL].

    Args:
        interval: Desired seconds between attacks
        config: GameConfig to read SLOWEST_ATTACK_INTERVAL from

    Returns:
        Clamped interval in seconds (float)
    """
    return max(0.0, min(config.slowest_attack_interval, float(interval)))
