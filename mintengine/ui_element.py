"""A node of the UI tree: a coloured rectangle laid out relative to its parent."""

import copy

import pygame

from mintengine.geometry import Point
from mintengine.style import PositionType, Style

_WHITE = pygame.Color(255, 255, 255, 255)


class UIElement:
    """A rectangle with a style, a parent and child elements."""

    def __init__(self):
        self._style = Style()
        self.dirty = True
        self.parent = None
        self._children = []
        self.positions = [Point(0.0, 0.0)] * 4
        self.colors = [pygame.Color(_WHITE) for _ in range(4)]

    def __repr__(self):
        return f"UIElement(style={self._style!r}, children={len(self._children)})"

    @property
    def children(self):
        """A copy of the list of child elements."""
        return list(self._children)

    @property
    def style(self):
        """The element's style; assigning stores a copy and marks it modified."""
        return self._style

    @style.setter
    def style(self, value):
        self._style = copy.copy(value)
        self.modified(True)

    def add(self, child):
        """Make ``child`` a child of this element."""
        child.parent = self
        self._children.append(child)
        self.modified(True)

    def modified(self, state):
        """Set the modified flag on this element and all its ancestors."""
        self.dirty = state
        if self.parent is not None:
            self.parent.modified(state)

    def compute_layout(self):
        """Resolve the layout of this element and its children if modified."""
        if not self.dirty:
            return
        self.resolve_layout()
        for child in self._children:
            child.compute_layout()

    def resolve_layout(self):
        """Work out the resolved bound and the rectangle's corners."""
        style = self._style
        resolved = style.resolved_bound
        if self.parent is not None:
            if style.position_type is PositionType.ABSOLUTE:
                resolved.position = style.bound.position
            else:
                resolved.position = (
                    style.bound.position + self.parent.style.resolved_bound.position
                )
        x, y = resolved.position.x, resolved.position.y
        width, height = resolved.size.width, resolved.size.height
        self.positions = [
            Point(x, y),
            Point(x + width, y),
            Point(x + width, y + height),
            Point(x, y + height),
        ]
        self.colors = [pygame.Color(style.background_color) for _ in range(4)]

    def _draw_quad(self, surface):
        first, opposite = self.positions[0], self.positions[2]
        left = round(min(first.x, opposite.x))
        top = round(min(first.y, opposite.y))
        width = round(abs(opposite.x - first.x))
        height = round(abs(opposite.y - first.y))
        color = self.colors[0]
        if width <= 0 or height <= 0 or color.a == 0:
            return
        if color.a == 255:
            surface.fill(color, pygame.Rect(left, top, width, height))
            return
        layer = pygame.Surface((width, height), pygame.SRCALPHA)
        layer.fill(color)
        surface.blit(layer, (left, top))

    def render(self, surface):
        """Draw this element and then its children onto ``surface``."""
        self._draw_quad(surface)
        for child in self._children:
            child.render(surface)