"""Animated sprites that play sprite-sheet animations."""

import pygame

from mintengine.animation import AnimDirection
from mintengine.clock import Time
from mintengine.geometry import Point, Rect, Size
from mintengine.timer import Timer
from mintengine.transform import Transformable

_WHITE = pygame.Color(255, 255, 255, 255)


def _blit_transformed(owner, image, surface, color):
    """Blit ``image`` onto ``surface`` with the owner's transform and tint."""
    width, height = image.get_size()
    if color != _WHITE:
        image = image.copy()
        image.fill(color, special_flags=pygame.BLEND_RGBA_MULT)
    scale_x, scale_y = owner.scale.x, owner.scale.y
    target_size = (
        max(0, round(width * abs(scale_x))),
        max(0, round(height * abs(scale_y))),
    )
    if target_size != (width, height):
        image = pygame.transform.scale(image, target_size)
    if scale_x < 0 or scale_y < 0:
        image = pygame.transform.flip(image, scale_x < 0, scale_y < 0)
    if owner.rotation:
        image = pygame.transform.rotate(image, -owner.rotation)
    bounds = owner.transform_rect(Rect(Point(0.0, 0.0), Size(width, height)))
    return surface.blit(image, (round(bounds.position.x), round(bounds.position.y)))


class Sprite(Transformable):
    """A drawable that cycles through the frames of its animations."""

    def __init__(self, animation=None):
        super().__init__()
        self.animations = []
        self.texture = None
        self.current_animation_index = 0
        self._current_frame = 0
        self.color = pygame.Color(_WHITE)
        self.positions = [Point(0.0, 0.0)] * 4
        self.tex_coords = [Point(0.0, 0.0)] * 4
        self._texture_rect = None
        self._direction = AnimDirection.FORWARD
        self.timer = Timer(1.0)
        self.is_paused = True
        self.looping = False
        if animation is None:
            self.set_current_frame(0)
            self.pause()
        else:
            self.init(animation)

    def __repr__(self):
        return (
            f"Sprite(animations={len(self.animations)}, "
            f"current_animation={self.current_animation_index}, "
            f"current_frame={self._current_frame}, playing={self.is_playing()})"
        )

    def init(self, animation=None):
        """Start playing ``animation``, or the first stored animation.

        Return True if the sprite was initialised, False if there was nothing
        to initialise it from.
        """
        if animation is not None:
            self.animations.append(animation)
            self.current_animation_index = 0
            first = animation
        elif self.animations:
            first = self.animations[0]
        else:
            return False
        self.texture = first.spritesheet
        self._current_frame = 0
        self.set_current_frame(0)
        self.timer.max_time = first.frame_time
        self._direction = AnimDirection.FORWARD
        self.play()
        self.looping = True
        return True

    def update(self, dt=None):
        """Advance the animation by ``dt`` seconds (the frame delta by default)."""
        if dt is None:
            dt = Time.delta_time
        animation = self.animations[self.current_animation_index]
        if self.is_paused and not animation.is_created():
            return
        self.timer.update(dt)
        if not self.timer.has_ended:
            return
        self.timer.restart()
        if self._current_frame + 1 < len(animation):
            self._current_frame += 1
        elif self.looping:
            self._current_frame = 0
        else:
            self.is_paused = True
        self.set_current_frame(self._current_frame, False)

    def set_current_animation(self, index):
        """Switch to the animation at ``index`` and restart from its first frame."""
        animation = self.animations[index]
        self.current_animation_index = index
        self._current_frame = 0
        self.timer.max_time = animation.frame_time
        self.timer.restart()

    def current_animation(self):
        """Return the animation currently playing."""
        return self.animations[self.current_animation_index]

    @property
    def current_frame(self):
        """Index of the current frame in the current animation."""
        return self._current_frame

    def set_current_frame(self, frame, reset_time=False):
        """Show ``frame`` of the current animation, optionally restarting the timer."""
        if not self.animations or not self.animations[self.current_animation_index].is_created():
            return
        rect = self.animations[self.current_animation_index].frame(frame)
        self.positions = [
            Point(0.0, 0.0),
            Point(0.0, float(rect.height)),
            Point(float(rect.width), float(rect.height)),
            Point(float(rect.width), 0.0),
        ]
        left, top = float(rect.x), float(rect.y)
        right, bottom = left + rect.width, top + rect.height
        self.tex_coords = [
            Point(left, top),
            Point(left, bottom),
            Point(right, bottom),
            Point(right, top),
        ]
        self._texture_rect = pygame.Rect(rect)
        if reset_time:
            self.timer.restart()

    def play(self, animation=None):
        """Resume playing; a given animation does not change the current one."""
        self.is_paused = False
        self.timer.start()

    def pause(self):
        self.is_paused = True
        self.timer.stop()

    def stop(self):
        """Pause and rewind the time spent on the current frame."""
        self.pause()
        self.timer.time = 0.0

    def add_animation(self, animation):
        """Store ``animation`` and return its index."""
        self.animations.append(animation)
        return len(self.animations) - 1

    def is_playing(self):
        return not self.is_paused

    @property
    def frame_time(self):
        """Time each frame is shown."""
        return self.timer.max_time

    @frame_time.setter
    def frame_time(self, value):
        self.timer.max_time = value
        self.current_animation().frame_time = value

    def reset_animation_progression(self):
        """Go back to the first frame index."""
        self._current_frame = 0

    def set_color(self, color):
        """Tint the sprite with ``color``."""
        self.color = pygame.Color(color)

    def local_bounds(self):
        """Return the bounds of the current frame, untransformed."""
        rect = self.animations[self.current_animation_index].frame(self._current_frame)
        return Rect(Point(0.0, 0.0), Size(float(rect.width), float(rect.height)))

    def global_bounds(self):
        """Return the bounds of the current frame after the transform."""
        return self.transform_rect(self.local_bounds())

    @property
    def direction(self):
        return self._direction

    @direction.setter
    def direction(self, value):
        if value != self._direction:
            self._direction = value
            self.scale = Point(-self.scale.x, self.scale.y)

    def draw(self, surface):
        """Draw the current frame; return the area drawn, or None if nothing was."""
        if self.texture is None or not self.animations:
            return None
        if not self.animations[self.current_animation_index].is_created():
            return None
        sheet = getattr(self.texture, "surface", None)
        if sheet is None or self._texture_rect is None:
            return None
        area = self._texture_rect.clip(sheet.get_rect())
        if area.width == 0 or area.height == 0:
            return None
        return _blit_transformed(self, sheet.subsurface(area), surface, self.color)