"""The game window and the binary file that configures it."""

import struct
from dataclasses import dataclass

import pygame

from mintengine.files import Serializable, open_binary

_LENGTH = struct.Struct("<Q")
_TAIL = struct.Struct("<4I?")

_STYLE_RESIZE = 2
_STYLE_FULLSCREEN = 8


def _read_exact(handle, size, path):
    data = handle.read(size)
    if len(data) < size:
        raise ValueError(f"window configuration {path!s} is truncated")
    return data


@dataclass
class WindowConfig(Serializable):
    """Title, size, style flags, frame-rate limit and vertical sync of a window."""

    title: str = ""
    width: int = 0
    height: int = 0
    style: int = 0
    framerate_limit: int = 0
    vsync: bool = False

    def serialize(self, path):
        """Write the configuration to ``path``."""
        title = self.title.encode("utf-8")
        try:
            tail = _TAIL.pack(
                self.width, self.height, self.style, self.framerate_limit, self.vsync
            )
        except struct.error as exc:
            raise ValueError(f"cannot serialise window configuration: {exc}") from None
        with open_binary(path, "w") as handle:
            handle.write(_LENGTH.pack(len(title)))
            handle.write(title)
            handle.write(tail)

    def deserialize(self, path):
        """Read a configuration written by :meth:`serialize`."""
        with open_binary(path, "r") as handle:
            (length,) = _LENGTH.unpack(_read_exact(handle, _LENGTH.size, path))
            title = _read_exact(handle, length, path).decode("utf-8")
            values = _TAIL.unpack(_read_exact(handle, _TAIL.size, path))
        self.title = title
        self.width, self.height, self.style, self.framerate_limit, self.vsync = values


def _display_flags(style):
    flags = 0
    if style & _STYLE_FULLSCREEN:
        flags |= pygame.FULLSCREEN
    elif style & _STYLE_RESIZE:
        flags |= pygame.RESIZABLE
    if style == 0:
        flags |= pygame.NOFRAME
    return flags


class Window:
    """The display window, created from a configuration file."""

    def __init__(self, config_path=None):
        self.config = None
        self.surface = None
        self._clock = None
        self._open = False
        if config_path is not None:
            self.create(config_path)

    def __repr__(self):
        return f"Window(config={self.config!r}, is_open={self._open!r})"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def is_open(self):
        return self._open

    def create(self, config_path):
        """Open the window described by the file at ``config_path``."""
        config = WindowConfig()
        config.deserialize(config_path)
        pygame.display.init()
        size = (config.width, config.height)
        flags = _display_flags(config.style)
        try:
            surface = pygame.display.set_mode(size, flags, vsync=int(config.vsync))
        except pygame.error:
            if not config.vsync:
                raise
            surface = pygame.display.set_mode(size, flags)
        pygame.display.set_caption(config.title)
        self.config = config
        self.surface = surface
        self._clock = pygame.time.Clock()
        self._open = True

    def poll_events(self):
        """Return the pending events, or an empty list if the window is closed."""
        if not self._open:
            return []
        return pygame.event.get()

    def clear(self):
        """Fill the window with black."""
        if self._open:
            self.surface.fill((0, 0, 0))

    def draw(self, drawable):
        """Draw ``drawable`` onto the window; return what its draw returns."""
        if not self._open:
            return None
        return drawable.draw(self.surface)

    def display(self):
        """Show what was drawn, waiting to respect the frame-rate limit."""
        if not self._open:
            return
        pygame.display.flip()
        if self.config.framerate_limit:
            self._clock.tick(self.config.framerate_limit)

    def close(self):
        """Close the window."""
        if not self._open:
            return
        self._open = False
        self.surface = None
        pygame.display.quit()