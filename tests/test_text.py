import os

import pygame
import pytest

from mintengine.assets import Font
from mintengine.geometry import Point
from mintengine.text import Text


@pytest.fixture
def font():
    pygame.font.init()
    path = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())
    asset = Font()
    asset.load(path)
    return asset


@pytest.fixture
def canvas():
    surface = pygame.Surface((400, 200), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    return surface


def test_defaults():
    text = Text()
    assert text.font is None
    assert text.string == ""
    assert text.character_size == 30


def test_font_is_kept(font):
    text = Text(font, "Main Menu", 72)
    assert text.font is font
    assert text.character_size == 72


def test_draw_without_font_draws_nothing(canvas):
    text = Text(string="hello")
    assert text.draw(canvas) is None
    assert canvas.get_bounding_rect().size == (0, 0)


def test_draw_empty_string_draws_nothing(font, canvas):
    assert Text(font, "").draw(canvas) is None
    assert canvas.get_bounding_rect().size == (0, 0)


def test_draw_places_text_at_position(font, canvas):
    text = Text(font, "Hello", 24)
    text.position = Point(15, 20)
    area = text.draw(canvas)
    assert area.topleft == (15, 20)
    drawn = canvas.get_bounding_rect()
    assert drawn.width > 0 and drawn.height > 0
    assert area.contains(drawn)


def test_larger_character_size_is_taller(font, canvas):
    small = Text(font, "Hello", 12).draw(canvas)
    large = Text(font, "Hello", 48).draw(canvas)
    assert large.height > small.height
    assert large.width > small.width


def test_scale_enlarges_drawn_area(font, canvas):
    plain = Text(font, "Hi", 20).draw(canvas)
    scaled_text = Text(font, "Hi", 20)
    scaled_text.scale = Point(2.0, 2.0)
    scaled = scaled_text.draw(canvas)
    assert scaled.width >= 2 * plain.width - 1
    assert scaled.height >= 2 * plain.height - 1


def test_changing_font_uses_new_font(font, canvas):
    text = Text(string="Hello", character_size=20)
    assert text.draw(canvas) is None
    text.font = font
    area = text.draw(canvas)
    assert area.width > 0