"""
invaders_core
-------------
Entity-update core for a vertically-scrolling shooter.

Exports:
    Bullet     - Vertical projectile, sprite chosen by firing direction
    EnemyShip  - Formation / bonus enemy with frame animation and explosion
    Cooldown   - Millisecond interval gate
    SpriteType - Visual asset tags
"""

from invaders_core.core.runtime.cooldown import Cooldown
from invaders_core.entities.entity_types import SpriteType
from invaders_core.entities.bullets.bullet import Bullet
from invaders_core.entities.enemies.enemy_ship import EnemyShip

__all__ = [
    'Bullet',
    'EnemyShip',
    'Cooldown',
    'SpriteType',
]
