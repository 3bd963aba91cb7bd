"""
test_base_entity.py
-------------------
Tests for the shared spatial data on BaseEntity.
"""

import pytest

from invaders_core.core.runtime.game_settings import Display, Palette
from invaders_core.entities.base_entity import BaseEntity
from invaders_core.entities.entity_types import EntityCategory, CollisionTags


@pytest.fixture
def entity():
    return BaseEntity(10, 20, 24, 16, Palette.WHITE)


class TestSpatialData:

    def test_initial_state(self, entity):
        assert entity.pos.x == 10
        assert entity.pos.y == 20
        assert entity.size == (24, 16)
        assert entity.color == (255, 255, 255)
        assert entity.sprite_type is None
        assert entity.category == EntityCategory.PARTICLE
        assert entity.collision_tag == CollisionTags.NEUTRAL

    def test_size_is_read_only(self, entity):
        with pytest.raises(AttributeError):
            entity.width = 99
        with pytest.raises(AttributeError):
            entity.height = 99

    def test_color_list_becomes_tuple(self):
        assert BaseEntity(0, 0, 1, 1, [255, 0, 0]).color == (255, 0, 0)

    def test_rect_follows_position(self, entity):
        entity.pos.x += 5
        entity.pos.y -= 30
        rect = entity.rect
        assert (rect.x, rect.y, rect.width, rect.height) == (15, -10, 24, 16)


class TestOffscreen:

    @pytest.mark.parametrize("x, y, expected", [
        (0, 0, False),
        (-24, 0, False),
        (-25, 0, True),
        (Display.WIDTH, 0, False),
        (Display.WIDTH + 1, 0, True),
        (0, -17, True),
        (0, Display.HEIGHT + 1, True),
    ])
    def test_box_fully_outside(self, x, y, expected):
        assert BaseEntity(x, y, 24, 16).is_offscreen() is expected

    def test_margin_extends_field(self):
        assert BaseEntity(-30, 0, 24, 16).is_offscreen(margin=10) is False


class TestRepr:

    def test_repr_without_sprite(self, entity):
        assert "sprite=None" in repr(entity)

    def test_repr_with_plain_string_sprite(self, entity):
        entity.sprite_type = "custom"
        assert "sprite=custom" in repr(entity)
