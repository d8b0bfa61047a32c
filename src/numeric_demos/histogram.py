# src/numeric_demos/histogram.py

from typing import List

from .errors import InvalidArgument


class Histogram:
    """
    Frequency counts of final ball positions.

    counts[p] is the number of recorded trials that ended at position p.
    Positions outside [0, size) are clamped onto the nearest edge bin rather
    than rejected, the same way the ball drop clamps its walk, so every call
    to record() adds exactly one to the total.

    Single-threaded; not thread-safe.
    """

    def __init__(self, size: int):
        if size <= 0:
            raise InvalidArgument("size must be > 0")

        self.counts: List[int] = [0] * size

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def record(self, position: int) -> int:
        """
        Count one trial at `position` (clamped into range).
        Returns the bin that was incremented.
        """
        p = min(max(0, position), len(self.counts) - 1)
        self.counts[p] += 1
        return p

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.counts)

    def __len__(self) -> int:
        return len(self.counts)

    def total(self) -> int:
        return sum(self.counts)

    def snapshot_counts(self) -> List[int]:
        """
        Return a copy of the counts for inspection.
        """
        return list(self.counts)
