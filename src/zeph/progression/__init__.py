"""Progression module - experience curves, level caps and attribute points."""

from zeph.progression.attributes import (
    attribute_points_for_level,
    clamp_attribute,
    clamp_level,
)
from zeph.progression.experience import build_exp_table, exp_needed_for_next_level

__all__ = [
    'attribute_points_for_level',
    'clamp_attribute',
    'clamp_level',
    'build_exp_table',
    'exp_needed_for_next_level',
]
