"""Timing module - regen ticks and attack readiness driven by the timing constants."""

from zeph.timing.attack import (
    attack_tick_threshold,
    can_attack,
    clamp_attack_interval,
    reset_attack_tick,
    update_attack_tick,
)
from zeph.timing.regen import reset_regen_state, update_regen

__all__ = [
    'attack_tick_threshold',
    'can_attack',
    'clamp_attack_interval',
    'reset_attack_tick',
    'update_attack_tick',
    'reset_regen_state',
    'update_regen',
]
