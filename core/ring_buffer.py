"""Fixed-capacity circular store of timestamped multi-channel samples."""
from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = ["SampleRing"]


class SampleRing:
    """
    Ring of ``capacity`` slots for up to ``channels`` values per sample.
    - timestamps live in a ``uint64[capacity]`` array, values in a
      ``float32[channels, capacity]`` array indexed ``[channel, slot]``.
    - ``cursor`` is the next slot to overwrite; it advances modulo capacity.
    - Slots that were never written read as zero.
    """

    def __init__(self, capacity: int, channels: int):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if channels < 1:
            raise ValueError("channels must be at least 1")
        self.capacity = int(capacity)
        self.channels = int(channels)
        self._timestamps = np.zeros(self.capacity, dtype=np.uint64)
        self._values = np.zeros((self.channels, self.capacity), dtype=np.float32)
        self._cursor = 0
        self._total_writes = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def total_writes(self) -> int:
        return self._total_writes

    def __len__(self) -> int:
        return min(self._total_writes, self.capacity)

    def wrap(self, index: int) -> int:
        """Map any integer position onto a slot index in ``[0, capacity)``."""
        return index % self.capacity

    def append(self, timestamp: int, values: Sequence[float]) -> None:
        # channels beyond len(values) keep whatever the slot held before
        slot = self._cursor
        count = len(values)
        if count:
            self._values[:count, slot] = values
        self._timestamps[slot] = timestamp
        self._cursor = self.wrap(slot + 1)
        self._total_writes += 1

    def read(self, slot: int, channel: int) -> float:
        if not 0 <= channel < self.channels:
            raise IndexError("channel out of range")
        return float(self._values[channel, self.wrap(slot)])

    def timestamp(self, slot: int) -> int:
        return int(self._timestamps[self.wrap(slot)])

    def latest_index(self) -> int:
        return self.wrap(self._cursor - 1 + self.capacity)

    def latest_timestamp(self) -> int:
        return self.timestamp(self.latest_index())

    def timestamps_at(self, slots: np.ndarray) -> np.ndarray:
        return self._timestamps[slots]

    def channel_values(self, channel: int, slots: np.ndarray) -> np.ndarray:
        if not 0 <= channel < self.channels:
            raise IndexError("channel out of range")
        return self._values[channel, slots]

