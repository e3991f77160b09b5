"""Select the buffered samples that fall inside the trailing display window."""
from __future__ import annotations

from typing import Iterator

from core.ring_buffer import SampleRing

__all__ = ["in_window", "select_window"]


def in_window(now: int, timestamp: int, duration: int) -> bool:
    # samples stamped after ``now`` never belong to the window
    if timestamp > now:
        return False
    return now - timestamp <= duration


def select_window(ring: SampleRing, now: int, duration: int) -> Iterator[int]:
    """Return an iterator over slot indices with ``now - timestamp <= duration``.

    Iteration starts at the write cursor and visits every slot once, so the
    surviving samples come out oldest first. ``duration`` is checked here,
    before any slot is visited; the walk itself is lazy and is meant to be
    re-run on every render pass.
    """
    if duration <= 0:
        raise ValueError("duration must be positive")
    return _walk(ring, now, duration)


def _walk(ring: SampleRing, now: int, duration: int) -> Iterator[int]:
    start = ring.cursor
    for position in range(start, start + ring.capacity):
        slot = ring.wrap(position)
        if in_window(now, ring.timestamp(slot), duration):
            yield slot
