"""Plain-data description of one rendered frame."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from core.cursor import CursorReadout, clamp_pointer, cursor_readout, locate_highlight_slot
from core.session import PlotSession, RunState
from core.view_window import select_window
from core.viewport import Viewport, map_x, map_y

__all__ = ["ChannelTrace", "FrameSnapshot", "build_frame"]


@dataclass(frozen=True)
class ChannelTrace:
    channel: int
    timestamps: np.ndarray
    values: np.ndarray
    xs: np.ndarray
    ys: np.ndarray
    highlighted: float | None
    highlight_xy: tuple[float, float] | None


@dataclass(frozen=True)
class FrameSnapshot:
    now: int
    display_period_us: int
    viewport: Viewport
    channels: tuple[ChannelTrace, ...]
    cursor: CursorReadout
    state: RunState
    total_writes: int

    @property
    def highlighted_values(self) -> list[float | None]:
        return [trace.highlighted for trace in self.channels]


def build_frame(session: PlotSession, viewport: Viewport) -> FrameSnapshot:
    """Window the ring at its latest timestamp and map it into ``viewport``.

    Samples are returned oldest first, which is the drawing order.
    """
    ring = session.ring
    now = ring.latest_timestamp()
    duration = session.display_period_us
    slots = np.fromiter(select_window(ring, now, duration), dtype=np.int64)
    timestamps = ring.timestamps_at(slots)
    xs = map_x(now, timestamps, duration, viewport)

    column, row = clamp_pointer(*session.pointer, viewport)
    pick = None
    slot = locate_highlight_slot(ring, now, duration, viewport, column)
    if slot is not None:
        pick = int(np.flatnonzero(slots == slot)[0])

    traces = []
    for channel in range(ring.channels):
        values = ring.channel_values(channel, slots)
        ys = map_y(values, viewport)
        highlighted = None
        highlight_xy = None
        if pick is not None:
            highlighted = float(values[pick])
            highlight_xy = (float(xs[pick]), float(ys[pick]))
        traces.append(
            ChannelTrace(channel, timestamps, values, xs, ys, highlighted, highlight_xy)
        )

    return FrameSnapshot(
        now=now,
        display_period_us=duration,
        viewport=viewport,
        channels=tuple(traces),
        cursor=cursor_readout(column, row, duration, viewport),
        state=session.state,
        total_writes=ring.total_writes,
    )
