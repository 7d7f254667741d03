"""
Sliding splicers used to smooth a wave before counting events.
"""

from collections import deque
from typing import Deque, List, Optional, Sequence


def window_from_half(half_width: int) -> int:
    """Full window length for a splicer of the given half-width."""
    return 2 * max(int(half_width), 0) + 1


class SlidingAverage:
    """
    Simple moving average splicer.

    At each step the splicer saves the newest value, drops the earliest one
    and gives the arithmetic mean of the window. The first ``window_size - 1``
    pushes produce no output (``None``).
    """

    def __init__(self, window_size: int) -> None:
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")
        self.window_size = int(window_size)
        self._window: Deque[float] = deque()
        self._sum = 0.0
        self.count = 0

    def push(self, x: float) -> Optional[float]:
        x = float(x)
        self._window.append(x)
        self._sum += x
        if self.count == self.window_size:
            self._sum -= self._window.popleft()
        else:
            self.count += 1
            if self.count < self.window_size:
                return None
        return self._sum / self.window_size


class SlidingMedian:
    """
    Moving median splicer over an external sequence.

    Each push copies ``window_size`` values starting at ``position`` into a
    scratch buffer, sorts it and returns the element at ``window_size // 2``.
    For an even window that is the upper-middle value, not the mean of the
    two middle values.
    """

    def __init__(self, window_size: int, values: Sequence[float]) -> None:
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")
        self.window_size = int(window_size)
        self._values = values
        self._end = len(values)
        self._scratch: List[float] = []

    def push(self, position: int) -> Optional[float]:
        if position < 0:
            raise ValueError(f"position must be >= 0, got {position}")
        stop = position + self.window_size
        if stop > self._end:
            # not enough trailing data
            return None

        self._scratch.clear()
        self._scratch.extend(float(v) for v in self._values[position:stop])
        self._scratch.sort()
        return self._scratch[self.window_size // 2]
