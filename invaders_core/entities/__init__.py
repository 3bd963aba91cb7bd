"""
invaders_core/entities/__init__.py
----------------------------------
Entity module exports.

Provides entity states and type constants used across all game entities.
These are lightweight enums and constants with no heavy dependencies.

Exports:
    LifecycleState - Destruction progression (ALIVE, DYING, DEAD)
    SpriteType     - Visual asset tags
    EntityCategory - Logical entity groupings (ENEMY, PROJECTILE, ...)
    CollisionTags  - Collision tag constants (ENEMY, PLAYER_BULLET, ...)
"""

from invaders_core.entities.entity_state import LifecycleState
from invaders_core.entities.entity_types import SpriteType, EntityCategory, CollisionTags

__all__ = [
    # States
    'LifecycleState',
    # Types
    'SpriteType',
    'EntityCategory',
    'CollisionTags',
]
