"""Global frame clock: delta time, application time and wall-clock time."""

import time as _time
from datetime import timedelta


class Time:
    """Process-wide frame timing, used through its class methods."""

    delta_time = 0.0
    app_time = 0.0

    _last_restart = None
    _frame = timedelta(0)

    @classmethod
    def init(cls):
        """Reset the clock and all timing data."""
        cls._last_restart = _time.perf_counter()
        cls._frame = timedelta(0)
        cls.delta_time = 0.0
        cls.app_time = 0.0

    @classmethod
    def restart(cls):
        """Measure the time since the last restart and update the timing data."""
        now = _time.perf_counter()
        if cls._last_restart is None:
            cls._last_restart = now
        elapsed = now - cls._last_restart
        cls._last_restart = now
        cls._frame = timedelta(seconds=elapsed)
        cls.delta_time = elapsed
        cls.app_time += elapsed

    @classmethod
    def frame_time(cls):
        """Return the duration of the last frame."""
        return cls._frame

    @classmethod
    def global_time(cls):
        """Return the current local time formatted by the locale."""
        return _time.strftime("%X", _time.localtime())