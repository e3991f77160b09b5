"""Pointer-driven lookup of the highlighted sample per channel."""
from __future__ import annotations

from dataclasses import dataclass

from core.ring_buffer import SampleRing
from core.view_window import select_window
from core.viewport import Viewport, map_x

__all__ = [
    "CursorReadout",
    "clamp_pointer",
    "cursor_readout",
    "locate_highlight_slot",
]


@dataclass(frozen=True)
class CursorReadout:
    column: float
    row: float
    time_offset_us: float
    value: float


def clamp_pointer(x: float, y: float, viewport: Viewport) -> tuple[float, float]:
    """Clamp a window-space pointer to the viewport and make it viewport-relative."""
    column = min(max(x, viewport.x), viewport.x + viewport.width) - viewport.x
    row = min(max(y, viewport.y), viewport.y + viewport.height) - viewport.y
    return column, row


def _qualifies(x: float, timestamp: int, now: int, column: float) -> bool:
    return x < column or (timestamp == now and x <= column)


def locate_highlight_slot(
    ring: SampleRing, now: int, duration: int, viewport: Viewport, column: float
) -> int | None:
    """Walk the window oldest to newest and keep the last sample left of ``column``.

    The newest sample also qualifies when it sits exactly on the column, and
    later samples win ties. Mapped x does not depend on the channel, so one
    walk serves every channel.
    """
    found: int | None = None
    for slot in select_window(ring, now, duration):
        ts = ring.timestamp(slot)
        if _qualifies(map_x(now, ts, duration, viewport), ts, now, column):
            found = slot
    return found

def cursor_readout(column: float, row: float, duration: int, viewport: Viewport) -> CursorReadout:
    """Time offset (microseconds before ``now``, so <= 0) and value under the pointer."""
    time_offset = (column / viewport.width - 1.0) * duration
    value = (1.0 - row / viewport.height) * viewport.span + viewport.lower
    return CursorReadout(column, row, time_offset, value)
