"""
base_entity.py
--------------
Shared spatial data for every movable entity (Bullet, EnemyShip).

Coordinate System
-----------------
- self.pos is the entity's top-left corner
- width/height define the collision box and never change
- rect is rebuilt from pos on every access, so it is always in sync

The base carries data only. Per-frame behaviour lives on the concrete
types, which the driver already knows when it calls update/move/destroy.
"""

import pygame

from invaders_core.core.runtime.game_settings import Display, Palette
from invaders_core.entities.entity_types import EntityCategory, CollisionTags


class BaseEntity:
    """Positioned, sized, tinted object with a sprite tag."""

    __slots__ = ('pos', '_width', '_height', 'color', 'sprite_type', 'category', 'collision_tag')

    def __init__(self, x: float, y: float, width: int, height: int, color: tuple = Palette.WHITE):
        """
        Args:
            x: Left edge
            y: Top edge
            width: Collision box width
            height: Collision box height
            color: RGB tint from the palette
        """
        self.pos = pygame.Vector2(x, y)
        self._width = width
        self._height = height
        self.color = tuple(color)
        self.sprite_type = None
        self.category = EntityCategory.PARTICLE
        self.collision_tag = CollisionTags.NEUTRAL

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple:
        return self._width, self._height

    @property
    def rect(self) -> pygame.Rect:
        """Collision box at the current position."""
        return pygame.Rect(int(self.pos.x), int(self.pos.y), self._width, self._height)

    # ===================================================================
    # Bounds & Visibility
    # ===================================================================

    def is_offscreen(self, margin: int = 0) -> bool:
        """Check if the whole box lies beyond the play field plus margin."""
        left, top = self.pos.x, self.pos.y
        return (
            left + self._width < -margin or
            left > Display.WIDTH + margin or
            top + self._height < -margin or
            top > Display.HEIGHT + margin
        )

    def __repr__(self) -> str:
        sprite = getattr(self.sprite_type, 'name', self.sprite_type)
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"size={self._width}x{self._height} "
            f"sprite={sprite}>"
        )
