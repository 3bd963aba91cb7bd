"""Entity types."""

from enum import Enum


class SpriteType(Enum):
    """
    Visual asset tags resolved by the rendering collaborator.

    Enemy tiers come in pairs (A1/A2, B1/B2, C1/C2) that alternate while
    the ship animates.
    """
    BULLET = "bullet"
    ENEMY_BULLET = "enemy_bullet"
    ENEMY_SHIP_A1 = "enemy_ship_a1"
    ENEMY_SHIP_A2 = "enemy_ship_a2"
    ENEMY_SHIP_B1 = "enemy_ship_b1"
    ENEMY_SHIP_B2 = "enemy_ship_b2"
    ENEMY_SHIP_C1 = "enemy_ship_c1"
    ENEMY_SHIP_C2 = "enemy_ship_c2"
    ENEMY_SHIP_SPECIAL = "enemy_ship_special"
    EXPLOSION = "explosion"


class EntityCategory:
    """High-level logical grouping for entities."""
    ENEMY = "enemy"
    PROJECTILE = "projectile"  # Used for bullets (both player and enemy)
    PARTICLE = "particle"


# ===========================================================
# Collision Tag Constants
# ===========================================================
class CollisionTags:
    """
    Standard collision tags for entity.collision_tag.
    Prevents typos and enables IDE autocomplete.
    """
    NEUTRAL = "neutral"

    PLAYER_BULLET = "player_bullet"

    ENEMY = "enemy"
    ENEMY_BULLET = "enemy_bullet"
