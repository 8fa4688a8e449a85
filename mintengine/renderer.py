"""Queues drawables for a frame and draws them onto the window."""

from mintengine.log import core_logger


class Renderer:
    """Collects drawables submitted during a frame and draws them in order."""

    def __init__(self):
        self.window = None
        self._queue = []

    def __repr__(self):
        return f"Renderer(window={self.window!r}, pending={len(self._queue)})"

    def __len__(self):
        return len(self._queue)

    def create(self, window):
        """Attach the renderer to ``window``."""
        self.window = window

    def submit(self, drawable):
        """Queue ``drawable`` for the next render."""
        self._queue.append(drawable)

    def render(self):
        """Clear the window, draw the queue in order, show it and empty the queue.

        Without a window, an error is logged and the queue is kept.
        """
        if self.window is None:
            core_logger().error("Renderer.render: window is None")
            return
        self.window.clear()
        for drawable in self._queue:
            self.window.draw(drawable)
        self.window.display()
        self._queue.clear()