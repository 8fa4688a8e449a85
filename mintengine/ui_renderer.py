"""Renders submitted UI trees onto an off-screen surface."""

import pygame

_TRANSPARENT = pygame.Color(0, 0, 0, 0)


class UIRenderer:
    """Collects UI elements and draws them onto its own transparent surface."""

    def __init__(self, size):
        self.surface = pygame.Surface(
            (int(size.width), int(size.height)), pygame.SRCALPHA
        )
        self._elements = []

    def __repr__(self):
        return f"UIRenderer(size={self.surface.get_size()!r}, pending={len(self._elements)})"

    def submit(self, element):
        """Queue ``element`` for the next render."""
        self._elements.append(element)

    def render(self):
        """Lay out and draw the queued elements, then empty the queue."""
        if not self._elements:
            return
        self.surface.fill(_TRANSPARENT)
        for element in self._elements:
            element.compute_layout()
            element.render(self.surface)
        self._elements.clear()