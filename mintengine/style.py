"""Layout and appearance settings of a UI element."""

import enum
import struct
from dataclasses import dataclass, field

import pygame

from mintengine.files import Serializable, open_binary
from mintengine.geometry import Rect

# position type, bound (x, y, width, height), background colour (r, g, b, a)
_RECORD = struct.Struct("<i4f4B")


class PositionType(enum.IntEnum):
    """How an element's position relates to its parent."""

    RELATIVE = 0
    ABSOLUTE = 1


def _transparent():
    return pygame.Color(0, 0, 0, 0)


def _copy_rect(rect):
    return Rect(rect.position, rect.size)


@dataclass
class Style(Serializable):
    """Position type, requested and resolved bounds, and background colour."""

    position_type: PositionType = PositionType.RELATIVE
    bound: Rect = field(default_factory=Rect)
    resolved_bound: Rect = field(default_factory=Rect)
    background_color: pygame.Color = field(default_factory=_transparent)

    def __copy__(self):
        return Style(
            self.position_type,
            _copy_rect(self.bound),
            _copy_rect(self.resolved_bound),
            pygame.Color(self.background_color),
        )

    def __deepcopy__(self, memo):
        return self.__copy__()

    def reset_resolved_bound(self):
        """Make the resolved bound a copy of the requested bound."""
        self.resolved_bound = _copy_rect(self.bound)

    def serialize(self, path):
        """Write the position type, bound and background colour to ``path``."""
        bound = self.bound
        try:
            data = _RECORD.pack(
                int(self.position_type),
                bound.position.x,
                bound.position.y,
                bound.size.width,
                bound.size.height,
                *tuple(pygame.Color(self.background_color)),
            )
        except struct.error as exc:
            raise ValueError(f"cannot serialise style: {exc}") from None
        with open_binary(path, "w") as handle:
            handle.write(data)

    def deserialize(self, path):
        """Read a style written by :meth:`serialize` and reset the resolved bound."""
        with open_binary(path, "r") as handle:
            data = handle.read(_RECORD.size)
        if len(data) < _RECORD.size:
            raise ValueError(f"style file {path!s} is truncated")
        kind, x, y, width, height, red, green, blue, alpha = _RECORD.unpack(data)
        position_type = PositionType(kind)
        from mintengine.geometry import Point, Size

        self.position_type = position_type
        self.bound = Rect(Point(x, y), Size(width, height))
        self.background_color = pygame.Color(red, green, blue, alpha)
        self.reset_resolved_bound()