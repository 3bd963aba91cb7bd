"""
enemy_ship.py
-------------
Defines the EnemyShip, a hostile craft the player shoots for points.

Responsibilities
----------------
- Hold the ship's point value, derived once from its sprite tier.
- Alternate between the tier's two animation frames on a cooldown.
- Move only when the formation controller tells it to.
- Switch to the explosion sprite when destroyed; removal is the collector's job.

Two construction modes exist: a formation ship, placed explicitly with a
tier sprite, and the bonus ship from EnemyShip.bonus(), which starts fully
off-screen to the left and must be moved into view by its driver.
"""

from invaders_core.core.debug.debug_logger import DebugLogger
from invaders_core.core.runtime.cooldown import Cooldown
from invaders_core.core.runtime.game_settings import Palette, Timing
from invaders_core.core.services.config_manager import load_config
from invaders_core.entities.base_entity import BaseEntity
from invaders_core.entities.entity_state import LifecycleState
from invaders_core.entities.entity_types import SpriteType, EntityCategory, CollisionTags


class EnemyShip(BaseEntity):
    """Formation or bonus enemy with a two-frame animation and explosion state."""

    # ===================================================================
    # Class Constants
    # ===================================================================

    BONUS_TYPE_POINTS = 100

    _POINT_VALUES = {
        SpriteType.ENEMY_SHIP_A1: 10,
        SpriteType.ENEMY_SHIP_A2: 10,
        SpriteType.ENEMY_SHIP_B1: 20,
        SpriteType.ENEMY_SHIP_B2: 20,
        SpriteType.ENEMY_SHIP_C1: 30,
        SpriteType.ENEMY_SHIP_C2: 30,
    }

    _ANIMATION_PAIRS = {
        SpriteType.ENEMY_SHIP_A1: SpriteType.ENEMY_SHIP_A2,
        SpriteType.ENEMY_SHIP_A2: SpriteType.ENEMY_SHIP_A1,
        SpriteType.ENEMY_SHIP_B1: SpriteType.ENEMY_SHIP_B2,
        SpriteType.ENEMY_SHIP_B2: SpriteType.ENEMY_SHIP_B1,
        SpriteType.ENEMY_SHIP_C1: SpriteType.ENEMY_SHIP_C2,
        SpriteType.ENEMY_SHIP_C2: SpriteType.ENEMY_SHIP_C1,
    }

    _FALLBACKS = {
        "enemy_ship": {
            "size": (24, 16),
            "color": Palette.WHITE,
            "animation_ms": Timing.ENEMY_ANIMATION_MS,
        },
        "bonus_ship": {
            "spawn": (-32, 60),
            "size": (32, 14),
            "color": Palette.RED,
            "animation_ms": Timing.ENEMY_ANIMATION_MS,
        },
    }

    __slots__ = ('animation_cooldown', 'death_state', '_point_value')

    _cached_defaults = None

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(self, x: int, y: int, sprite_type: SpriteType, clock=None, *,
                 _section: str = "enemy_ship", _point_value=None):
        """
        Args:
            x, y: Initial top-left position
            sprite_type: Tier sprite the ship starts on; also selects its points
            clock: Millisecond clock for the animation cooldown (tests inject one)
            _section: entities.json section holding size/color/interval (bonus() only)
            _point_value: Fixed score overriding the tier table (bonus() only)
        """
        defaults = self._defaults(_section)
        width, height = defaults["size"]
        super().__init__(x, y, width, height, defaults["color"])

        self.sprite_type = sprite_type
        self.category = EntityCategory.ENEMY
        self.collision_tag = CollisionTags.ENEMY
        self.death_state = LifecycleState.ALIVE

        if _point_value is None:
            _point_value = self._POINT_VALUES.get(sprite_type, 0)
        self._point_value = _point_value

        self.animation_cooldown = Cooldown(defaults["animation_ms"], clock=clock)
        self.animation_cooldown.reset()

        sprite = getattr(sprite_type, 'name', sprite_type)
        DebugLogger.init(f"Spawned {sprite} at ({x}, {y}) | Points={self._point_value}",
                         category="entity_spawn")

    @classmethod
    def bonus(cls, clock=None) -> "EnemyShip":
        """Build the bonus ship at its fixed off-screen spawn point."""
        x, y = cls._defaults("bonus_ship")["spawn"]
        return cls(x, y, SpriteType.ENEMY_SHIP_SPECIAL, clock,
                   _section="bonus_ship", _point_value=cls.BONUS_TYPE_POINTS)

    @classmethod
    def _defaults(cls, section: str) -> dict:
        """Config section merged over the built-in fallbacks for that section."""
        if EnemyShip._cached_defaults is None:
            EnemyShip._cached_defaults = load_config("entities.json", cls._FALLBACKS)
        return EnemyShip._cached_defaults[section]

    # ===================================================================
    # Scoring
    # ===================================================================

    @property
    def point_value(self) -> int:
        return self._point_value

    def get_point_value(self) -> int:
        return self._point_value

    # ===================================================================
    # Movement & Animation
    # ===================================================================

    def move(self, distance_x, distance_y):
        """Translate by the given distance. No clamping to the play field."""
        self.pos.x += distance_x
        self.pos.y += distance_y

    def update(self):
        """Swap to the paired animation frame whenever the cooldown has run out."""
        if self.death_state != LifecycleState.ALIVE:
            return

        if self.animation_cooldown.check_finished():
            self.animation_cooldown.reset()

            next_sprite = self._ANIMATION_PAIRS.get(self.sprite_type)
            if next_sprite is not None:
                DebugLogger.trace(f"{self.sprite_type.name} -> {next_sprite.name}")
                self.sprite_type = next_sprite

    # ===================================================================
    # Lifecycle
    # ===================================================================

    def destroy(self):
        """Mark the ship hit and show the explosion. Safe to call repeatedly."""
        if self.death_state == LifecycleState.ALIVE:
            self.death_state = LifecycleState.DYING
            sprite = getattr(self.sprite_type, 'name', self.sprite_type)
            DebugLogger.state(f"[{type(self).__name__}] {sprite} -> EXPLOSION")
        self.sprite_type = SpriteType.EXPLOSION
        self.collision_tag = CollisionTags.NEUTRAL

    def mark_dead(self):
        """Flag the ship for removal. Called by the collector after the explosion delay."""
        self.destroy()
        if self.death_state != LifecycleState.DEAD:
            self.death_state = LifecycleState.DEAD
            DebugLogger.state(f"[{type(self).__name__}] -> {self.death_state.name}")

    def is_destroyed(self) -> bool:
        return self.death_state != LifecycleState.ALIVE
