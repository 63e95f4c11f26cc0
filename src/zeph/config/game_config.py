"""Game configuration module - the fixed tuning constants shared by every subsystem."""

from enum import Enum
from types import MappingProxyType


# Map
TILE_SIZE = 64
MAP_WIDTH = 20
MAP_HEIGHT = 20

# Character

# When regeneration happens, in seconds
REGEN_INTERVAL = 2.0

# How slow can a character attack, i.e. 1 attack in n seconds
SLOWEST_ATTACK_INTERVAL = 3.0

MAX_LEVEL_BASE = 100
MAX_LEVEL_STAT = 100
MAX_LEVEL_JOB = 60
MAX_LEVEL_SKILL = 10
MAX_ATTRIBUTE = 100
ATTRIBUTE_POINTS_PER_LEVEL = 3

# By what value experience needed for next level increases per level
EXP_NEEDED_INC_BASE = 1.75
EXP_NEEDED_INC_STAT = 1.5
EXP_NEEDED_INC_JOB = 2.25

EXP_NEEDED_FOR_LEVEL2 = 10

# Gameplay
STARTING_MONEY = 100
MAX_INVENTORY_SIZE = 30


# Attribute name -> constant name, grouped by purpose and kept in table order
CONFIG_GROUPS = MappingProxyType({
    'map': (
        ('tile_size', 'TILE_SIZE'),
        ('map_width', 'MAP_WIDTH'),
        ('map_height', 'MAP_HEIGHT'),
    ),
    'character': (
        ('regen_interval', 'REGEN_INTERVAL'),
        ('slowest_attack_interval', 'SLOWEST_ATTACK_INTERVAL'),
        ('max_level_base', 'MAX_LEVEL_BASE'),
        ('max_level_stat', 'MAX_LEVEL_STAT'),
        ('max_level_job', 'MAX_LEVEL_JOB'),
        ('max_level_skill', 'MAX_LEVEL_SKILL'),
        ('max_attribute', 'MAX_ATTRIBUTE'),
        ('attribute_points_per_level', 'ATTRIBUTE_POINTS_PER_LEVEL'),
        ('exp_needed_inc_base', 'EXP_NEEDED_INC_BASE'),
        ('exp_needed_inc_stat', 'EXP_NEEDED_INC_STAT'),
        ('exp_needed_inc_job', 'EXP_NEEDED_INC_JOB'),
        ('exp_needed_for_level2', 'EXP_NEEDED_FOR_LEVEL2'),
    ),
    'gameplay': (
        ('starting_money', 'STARTING_MONEY'),
        ('max_inventory_size', 'MAX_INVENTORY_SIZE'),
    ),
})

PARAM_NAMES = tuple(attr for group in CONFIG_GROUPS.values() for attr, _ in group)

_CONSTANT_TO_PARAM = {
    const: attr for group in CONFIG_GROUPS.values() for attr, const in group
}

# Attribute name -> import-time value of its constant
_LITERALS = MappingProxyType({
    attr: globals()[const] for group in CONFIG_GROUPS.values() for attr, const in group
})


class ProgressionTrack(Enum):
    """Progression tracks that carry their own level cap."""

    BASE = 'base'
    STAT = 'stat'
    JOB = 'job'
    SKILL = 'skill'


class GameConfig:
    """
    Read-only view of the game's tuning constants.

    Every attribute holds the import-time value of a module-level constant,
    fixed for the life of the process. Attributes cannot be assigned or deleted.
    Use the shared ``CONFIG`` instance rather than creating new ones.
    """

    __slots__ = PARAM_NAMES

    def __init__(self):
        """Initialize configuration from the import-time literals."""
        for name, value in _LITERALS.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"GameConfig is read-only: cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"GameConfig is read-only: cannot delete '{name}'")

    def __eq__(self, other):
        if not isinstance(other, GameConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(tuple(self.to_dict().items()))

    def __repr__(self):
        return f"GameConfig(tile_size={self.tile_size}, map={self.map_width}x{self.map_height})"

    @property
    def map_size_pixels(self):
        """Map dimensions in pixels as (width, height)."""
        return (self.map_width * self.tile_size, self.map_height * self.tile_size)

    def max_level(self, track):
        """
        Get the level cap of a progression track.

        Args:
            track: ProgressionTrack member

        Returns:
            Maximum level for the track (int)
        """
        return getattr(self, f'max_level_{ProgressionTrack(track).value}')

    def get_config_param(self, param_name):
        """
        Get a configuration parameter by name.

        Accepts either the attribute name ('tile_size') or the constant
        name ('TILE_SIZE').

        Args:
            param_name: Name of the parameter

        Returns:
            The parameter value

        Raises:
            KeyError: If no parameter has that name
        """
        attr = _CONSTANT_TO_PARAM.get(param_name, param_name)
        if attr not in PARAM_NAMES:
            raise KeyError(f"Unknown config parameter: {param_name!r}")
        return getattr(self, attr)

    def to_dict(self):
        """
        Convert configuration to dictionary.

        Returns:
            New dictionary of all configuration parameters in table order
        """
        return {name: getattr(self, name) for name in PARAM_NAMES}

    def apply_to_instance(self, instance):
        """
        Apply configuration settings to an instance object.

        Args:
            instance: Object to copy every parameter onto as attributes
        """
        for name in PARAM_NAMES:
            setattr(instance, name, getattr(self, name))


# Shared instance, created once at import
CONFIG = GameConfig()


def get_game_config():
    """Get the process-wide GameConfig."""
    return CONFIG


def print_config(config=None):
    """
    Print every configuration parameter grouped by purpose.

    Args:
        config: GameConfig to print (defaults to the shared instance)
    """
    if config is None:
        config = CONFIG

    for group, params in CONFIG_GROUPS.items():
        print(f"[Config] {group}:")
        for attr, _ in params:
            print(f"[Config]   {attr} = {getattr(config, attr)}")
