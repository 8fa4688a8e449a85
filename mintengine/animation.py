"""Sprite-sheet animations: a texture and the frame rectangles cut from it."""

import enum
from dataclasses import dataclass

import pygame


class AnimDirection(enum.Enum):
    """The way an animated sprite faces."""

    FORWARD = enum.auto()
    BACKWARD = enum.auto()


@dataclass
class AnimationData:
    """A description of a row of equally sized frames in a sprite sheet."""

    texture: object = None
    frame_number: int = 0
    frame_y: int = 0
    frame_width: int = 0
    frame_height: int = 0
    frame_time: float = 0.0


class Animation:
    """A sprite sheet, its frame rectangles and the time each frame shows."""

    def __init__(self, spritesheet=None, frame_time=0.0):
        self.spritesheet = spritesheet
        self.frame_time = frame_time
        self.frames = []

    def __repr__(self):
        return (
            f"Animation(spritesheet={self.spritesheet!r}, "
            f"frame_time={self.frame_time!r}, frames={self.frames!r})"
        )

    @classmethod
    def from_data(cls, data):
        """Build an animation from a row of frames described by ``data``."""
        animation = cls(data.texture, data.frame_time)
        for index in range(data.frame_number):
            animation.add_frame(
                (index * data.frame_width, data.frame_y, data.frame_width, data.frame_height)
            )
        return animation

    @classmethod
    def from_texture(cls, texture):
        """Build a one-frame animation covering the whole texture."""
        animation = cls(texture, 1.0)
        width, height = texture.size()
        animation.add_frame((0, 0, width, height))
        return animation

    def add_frame(self, rect):
        """Append a frame rectangle (anything pygame.Rect accepts)."""
        self.frames.append(pygame.Rect(rect))

    def frame(self, index):
        """Return the frame rectangle at ``index``; IndexError if out of range."""
        if not 0 <= index < len(self.frames):
            raise IndexError(f"frame index {index} out of range")
        return self.frames[index]

    def __len__(self):
        return len(self.frames)

    def is_created(self):
        """Return True if there is a sprite sheet and at least one frame."""
        return self.spritesheet is not None and bool(self.frames)