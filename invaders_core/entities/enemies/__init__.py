"""
Enemy entity package.
"""

from .enemy_ship import EnemyShip

__all__ = [
    'EnemyShip',
]
