"""
game_settings.py
----------------
Centralized constants for the entity core.
"""


# ===========================================================
# Display
# ===========================================================

class Display:
    """Play-field size the driver renders into."""
    WIDTH: int = 448
    HEIGHT: int = 520


# ===========================================================
# Palette
# ===========================================================

class Palette:
    """Fixed RGB colors entities are tinted with."""
    WHITE: tuple = (255, 255, 255)
    RED: tuple = (255, 0, 0)


# ===========================================================
# Timing
# ===========================================================

class Timing:
    """Millisecond intervals."""
    ENEMY_ANIMATION_MS: int = 500
