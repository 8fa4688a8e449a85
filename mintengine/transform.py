"""Position, rotation, scale and origin of a drawable object."""

import math

from mintengine.geometry import Point, Rect, Size


class Transformable:
    """Holds a 2D transform and applies it to points and rectangles."""

    def __init__(self):
        self.position = Point(0.0, 0.0)
        self.scale = Point(1.0, 1.0)
        self.origin = Point(0.0, 0.0)
        self.rotation = 0.0

    def _apply(self, x, y):
        angle = -math.radians(self.rotation)
        cosine = math.cos(angle)
        sine = math.sin(angle)
        sxc = self.scale.x * cosine
        syc = self.scale.y * cosine
        sxs = self.scale.x * sine
        sys_ = self.scale.y * sine
        tx = -self.origin.x * sxc - self.origin.y * sys_ + self.position.x
        ty = self.origin.x * sxs - self.origin.y * syc + self.position.y
        return sxc * x + sys_ * y + tx, -sxs * x + syc * y + ty

    def transform_rect(self, rect):
        """Return the axis-aligned bounding box of ``rect`` after transforming it."""
        left = rect.position.x
        top = rect.position.y
        right = left + rect.size.width
        bottom = top + rect.size.height
        corners = [
            self._apply(left, top),
            self._apply(left, bottom),
            self._apply(right, top),
            self._apply(right, bottom),
        ]
        xs = [x for x, _ in corners]
        ys = [y for _, y in corners]
        min_x, min_y = min(xs), min(ys)
        return Rect(Point(min_x, min_y), Size(max(xs) - min_x, max(ys) - min_y))