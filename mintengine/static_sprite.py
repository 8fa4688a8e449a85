"""Sprites that show a whole texture."""

import pygame

from mintengine.geometry import Point, Rect, Size
from mintengine.transform import Transformable

_WHITE = pygame.Color(255, 255, 255, 255)


class StaticSprite(Transformable):
    """A drawable that shows one texture in full."""

    def __init__(self, texture=None):
        super().__init__()
        self.positions = [Point(0.0, 0.0)] * 4
        self.tex_coords = [Point(0.0, 0.0)] * 4
        self._color = pygame.Color(_WHITE)
        self._texture = None
        self.texture = texture

    def __repr__(self):
        return f"StaticSprite(texture={self._texture!r})"

    @property
    def texture(self):
        return self._texture

    @texture.setter
    def texture(self, value):
        self._texture = value
        self._update_positions()

    @property
    def color(self):
        return pygame.Color(self._color)

    @color.setter
    def color(self, value):
        self._color = pygame.Color(value)

    def _update_positions(self):
        if self._texture is None:
            return
        width, height = (float(v) for v in self._texture.size())
        self.positions = [
            Point(0.0, 0.0),
            Point(0.0, height),
            Point(width, height),
            Point(width, 0.0),
        ]
        self.tex_coords = list(self.positions)

    def local_bounds(self):
        """Return the texture's bounds, untransformed; ValueError without texture."""
        if self._texture is None:
            raise ValueError("StaticSprite has no texture")
        width, height = self._texture.size()
        return Rect(Point(0.0, 0.0), Size(float(width), float(height)))

    def global_bounds(self):
        """Return the texture's bounds after the transform."""
        return self.transform_rect(self.local_bounds())

    def draw(self, surface):
        """Draw the texture; return the area drawn, or None if nothing was."""
        if self._texture is None:
            return None
        image = getattr(self._texture, "surface", None)
        if image is None:
            return None
        width, height = image.get_size()
        if self._color != _WHITE:
            image = image.copy()
            image.fill(self._color, special_flags=pygame.BLEND_RGBA_MULT)
        scale_x, scale_y = self.scale.x, self.scale.y
        target_size = (
            max(0, round(width * abs(scale_x))),
            max(0, round(height * abs(scale_y))),
        )
        if target_size != (width, height):
            image = pygame.transform.scale(image, target_size)
        if scale_x < 0 or scale_y < 0:
            image = pygame.transform.flip(image, scale_x < 0, scale_y < 0)
        if self.rotation:
            image = pygame.transform.rotate(image, -self.rotation)
        bounds = self.transform_rect(Rect(Point(0.0, 0.0), Size(width, height)))
        return surface.blit(image, (round(bounds.position.x), round(bounds.position.y)))