"""Regeneration timing - decides when an HP/SP regen tick fires."""

from zeph.config.game_config import CONFIG


def update_regen(instance, tpf, config=CONFIG):
    """
    Advance the regen timer and report whether HP/SP should be restored.

    Accumulates ``tpf`` into ``instance.regen_tick``. Once the accumulated
    time reaches REGEN_INTERVAL the timer resets to zero. A poisoned
    character still consumes the tick but does not regenerate.

    Args:
        instance: Character with regen_tick (float) and poisoned (bool)
        tpf: Seconds elapsed since the previous update
        config: GameConfig to read REGEN_INTERVAL from

    Returns:
        True if regeneration should be applied this update, False otherwise

    Raises:
        ValueError: If tpf is negative
    """
    if tpf < 0:
        raise ValueError(f"Time per frame must be non-negative, got {tpf}")

    instance.regen_tick += tpf
    if instance.regen_tick < config.regen_interval:
        return False

    instance.regen_tick = 0.0
    return not instance.poisoned


def reset_regen_state(instance):
    """Reset the regen timer of a character."""
    instance.regen_tick = 0.0
