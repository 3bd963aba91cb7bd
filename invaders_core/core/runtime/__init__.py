"""
Runtime configuration exports.

Provides constants and the interval timer. All exports are lightweight
with no initialization overhead.
"""

from invaders_core.core.runtime.game_settings import (
    Display,
    Palette,
    Timing,
)
from invaders_core.core.runtime.cooldown import Cooldown, monotonic_ms

__all__ = [
    'Display',
    'Palette',
    'Timing',
    'Cooldown',
    'monotonic_ms',
]
