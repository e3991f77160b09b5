"""Text for the header and cursor readouts; kept free of GUI imports for testing."""

from __future__ import annotations

from core.cursor import CursorReadout

US_PER_S = 1e6


def format_header(
    *, display_period_us: int, lower: float, upper: float, port: str, now_us: int
) -> str:
    return (
        f"display period: {display_period_us / US_PER_S:.3f}s, "
        f"value: <{lower:.3f}, {upper:.3f}>, "
        f"port: {port}, board time: {now_us / US_PER_S:.3f}s"
    )


def format_channel_readout(channel: int, value: float | None) -> str:
    if value is None:
        return f"Channel {channel}: ---"
    return f"Channel {channel}: {value:.3f}"


def format_cursor_time(cursor: CursorReadout) -> str:
    return f"Cursor t: {cursor.time_offset_us / US_PER_S:.3f}s"


def format_cursor_value(cursor: CursorReadout) -> str:
    return f"Cursor v: {cursor.value:.3f}"
