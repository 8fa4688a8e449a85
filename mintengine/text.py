"""Drawable text that keeps the font asset it is drawn with."""

import pygame

from mintengine.transform import Transformable

DEFAULT_CHARACTER_SIZE = 30


class Text(Transformable):
    """A string drawn with a font asset at a character size and a colour."""

    def __init__(self, font=None, string="", character_size=DEFAULT_CHARACTER_SIZE):
        super().__init__()
        self.font = font
        self.string = string
        self.character_size = character_size
        self.color = (255, 255, 255, 255)
        self._faces = {}

    def __repr__(self):
        return (
            f"Text(font={self.font!r}, string={self.string!r}, "
            f"character_size={self.character_size!r})"
        )

    def _face(self):
        if self.font is None or getattr(self.font, "path", None) is None:
            return None
        key = (self.font.path, self.character_size)
        face = self._faces.get(key)
        if face is None:
            if not pygame.font.get_init():
                pygame.font.init()
            face = pygame.font.Font(self.font.path, self.character_size)
            self._faces[key] = face
        return face

    def draw(self, surface):
        """Draw onto ``surface``; return the area drawn, or None if nothing was."""
        face = self._face()
        if face is None or not self.string:
            return None
        image = face.render(self.string, True, self.color)
        scale_x, scale_y = self.scale.x, self.scale.y
        if (scale_x, scale_y) != (1.0, 1.0):
            width = max(0, round(image.get_width() * abs(scale_x)))
            height = max(0, round(image.get_height() * abs(scale_y)))
            image = pygame.transform.scale(image, (width, height))
            image = pygame.transform.flip(image, scale_x < 0, scale_y < 0)
        left = self.position.x - self.origin.x * abs(scale_x)
        top = self.position.y - self.origin.y * abs(scale_y)
        return surface.blit(image, (round(left), round(top)))