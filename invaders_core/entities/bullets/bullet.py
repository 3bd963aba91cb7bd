"""
bullet.py
---------
Defines the Bullet, a projectile that moves vertically up or down.

Responsibilities
----------------
- Move by a constant signed speed each tick (negative is up).
- Pick the player or enemy bullet sprite from the direction it was fired in.
- Leave off-screen and collision removal to the driver.
"""

from invaders_core.core.debug.debug_logger import DebugLogger
from invaders_core.core.runtime.game_settings import Palette
from invaders_core.core.services.config_manager import load_config
from invaders_core.entities.base_entity import BaseEntity
from invaders_core.entities.entity_types import SpriteType, EntityCategory, CollisionTags


class Bullet(BaseEntity):
    """Vertical projectile fired by the player (speed < 0) or an enemy."""

    __slots__ = ('_speed',)

    _cached_defaults = None

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, x: int, y: int, speed: int):
        """
        Args:
            x, y: Initial top-left position
            speed: Pixels per tick, positive is down
        """
        if Bullet._cached_defaults is None:
            Bullet._cached_defaults = load_config("entities.json").get("bullet", {})
        defaults = Bullet._cached_defaults

        width, height = defaults.get("size", (6, 10))
        super().__init__(x, y, width, height, defaults.get("color", Palette.WHITE))

        self.category = EntityCategory.PROJECTILE
        self._speed = speed
        self.set_sprite()

        DebugLogger.init(f"Spawned {self.collision_tag} at ({x}, {y}) | Speed={speed}",
                         category="bullet")

    # ===========================================================
    # Sprite
    # ===========================================================
    def set_sprite(self):
        """Derive sprite and collision tag from the current speed."""
        if self._speed < 0:
            self.sprite_type = SpriteType.BULLET
            self.collision_tag = CollisionTags.PLAYER_BULLET
        else:
            self.sprite_type = SpriteType.ENEMY_BULLET
            self.collision_tag = CollisionTags.ENEMY_BULLET

    # ===========================================================
    # Speed
    # ===========================================================
    @property
    def speed(self) -> int:
        return self._speed

    @speed.setter
    def speed(self, value: int):
        # Sprite stays as fired; call set_sprite() to flip it
        self._speed = value

    def set_speed(self, speed: int):
        self.speed = speed

    def get_speed(self) -> int:
        return self._speed

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self):
        """Advance one tick along the y axis."""
        self.pos.y += self._speed
