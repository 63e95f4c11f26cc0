"""Experience curves - experience needed per level for each progression track."""

import math
from fractions import Fraction
from numbers import Integral

import numpy as np

from zeph.config.game_config import CONFIG, ProgressionTrack


# (track, config) -> read-only experience table
_exp_tables = {}


def _exp_multiplier(track, config):
    track = ProgressionTrack(track)
    if track is ProgressionTrack.SKILL:
        raise ValueError("Skill levels have no experience curve")
    # Exact decimal value of the literal, e.g. 1.75 -> 7/4
    return Fraction(str(getattr(config, f'exp_needed_inc_{track.value}')))


def build_exp_table(track, config=CONFIG):
    """
    Build the experience table for a progression track.

    Entry i is the experience needed to go from level i + 1 to level i + 2,
    i.e. floor(EXP_NEEDED_FOR_LEVEL2 * inc ** i) computed exactly. High
    levels exceed int64, so entries are Python ints in an object array.
    Tables are cached and returned read-only.

    Args:
        track: ProgressionTrack (BASE, STAT or JOB)
        config: GameConfig to read constants from

    Returns:
        numpy object array of ints, length max_level - 1
    """
    key = (ProgressionTrack(track), config)
    table = _exp_tables.get(key)
    if table is None:
        inc = _exp_multiplier(track, config)
        needed = Fraction(config.exp_needed_for_level2)
        entries = []
        for _ in range(config.max_level(track) - 1):
            entries.append(math.floor(needed))
            needed *= inc
        table = np.array(entries, dtype=object)
        table.flags.writeable = False
        _exp_tables[key] = table
    return table


def exp_needed_for_next_level(level, track=ProgressionTrack.BASE, config=CONFIG):
    """
    Get experience needed to advance from ``level`` to ``level + 1``.

    Args:
        level: Current level, an integer from 1 up to (but excluding) the track cap
        track: ProgressionTrack (BASE, STAT or JOB)
        config: GameConfig to read constants from

    Returns:
        Experience needed (int)

    Raises:
        ValueError: If level is not an integer in range or the track has no curve
    """
    table = build_exp_table(track, config)
    max_level = config.max_level(track)
    if not isinstance(level, Integral) or not 1 <= level < max_level:
        raise ValueError(
            f"Level {level!r} out of range for {ProgressionTrack(track).name} track "
            f"(expected an integer from 1 to {max_level - 1})"
        )
    return int(table[int(level) - 1])
