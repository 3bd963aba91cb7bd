"""
entity_state.py
---------------
Defines runtime state enumerations for entity types.
Contains only states that change over time during gameplay.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks the destruction progression of an entity.

    ALIVE -> DYING is driven by the entity itself (destroy()).
    DYING -> DEAD is driven by the collector that owns the active list,
    once it has shown the explosion long enough.
    """
    ALIVE = 0
    DYING = 1      # Showing explosion sprite
    DEAD = 2       # Ready for removal
