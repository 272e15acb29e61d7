"""
Timing and performance measurement utilities.
"""

import time
from collections import deque


class FPSCounter:
    """FPS measurement over a rolling window of frame intervals."""

    def __init__(self, window_size=30, clock=time.perf_counter):
        """Initialize FPS counter with specified window size."""
        self.clock = clock
        self.prev_frame_time = None
        self.frame_times = deque(maxlen=window_size)

    def update(self):
        """Record that a frame was processed."""
        current_time = self.clock()
        if self.prev_frame_time is not None:
            self.frame_times.append(current_time - self.prev_frame_time)
        self.prev_frame_time = current_time

    def get_fps(self):
        """Average FPS over the window, 0 before two frames were seen."""
        if not self.frame_times:
            return 0.0

        avg_frame_time = sum(self.frame_times) / len(self.frame_times)
        return 1.0 / avg_frame_time if avg_frame_time > 0 else 0.0

    def reset(self):
        self.frame_times.clear()
        self.prev_frame_time = None


class Timer:
    """Context manager measuring one block, e.g. a model call."""

    def __init__(self, clock=time.perf_counter):
        self.clock = clock
        self.start_time = None
        self.end_time = None

    def __enter__(self):
        self.start_time = self.clock()
        self.end_time = None
        return self

    def __exit__(self, exc_type, exc, tb):
        self.end_time = self.clock()

    def elapsed_ms(self):
        """Elapsed milliseconds, measured up to now while still running."""
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else self.clock()
        return (end - self.start_time) * 1000.0
