"""A countdown-style timer driven by explicit time steps."""


class Timer:
    """Accumulates elapsed time and flags when a time limit is reached.

    A new timer starts running immediately.
    """

    def __init__(self, max_time=0.0):
        self.time = 0.0
        self.max_time = max_time
        self.is_running = False
        self.has_ended = False
        self.start()

    def __repr__(self):
        return (
            f"Timer(time={self.time!r}, max_time={self.max_time!r}, "
            f"is_running={self.is_running!r}, has_ended={self.has_ended!r})"
        )

    def update(self, dt):
        """Advance the timer by ``dt`` seconds; stop and end it at the limit."""
        if not self.is_running:
            return
        self.time += dt
        if self.time >= self.max_time:
            self.stop()
            self.end()

    @property
    def remaining_time(self):
        """Time left before the limit is reached."""
        return self.max_time - self.time

    def restart(self):
        """Start a new period, carrying over any time past the limit."""
        self.time = max(self.time - self.max_time, 0.0)
        self.has_ended = False
        self.start()

    def start(self):
        self.is_running = True

    def stop(self):
        self.is_running = False

    def end(self):
        self.has_ended = True