"""Map (timestamp, value) pairs into viewport pixel coordinates."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = ["Viewport", "map_x", "map_y"]


@dataclass(frozen=True)
class Viewport:
    """Pixel rectangle plus the value range drawn inside it.

    ``x``/``y`` are the rectangle origin in window pixels; the mapped
    coordinates returned by :func:`map_x` and :func:`map_y` are relative to it.
    """

    x: float
    y: float
    width: float
    height: float
    lower: float
    upper: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport width and height must be positive")
        if self.upper == self.lower:
            raise ValueError("value range must not be empty")

    @property
    def span(self) -> float:
        return self.upper - self.lower


def map_x(now: int, timestamp, duration: int, viewport: Viewport):
    """Most recent sample lands on the right edge; older samples move left.

    Accepts a scalar timestamp or an array of them.
    """
    if duration <= 0:
        raise ValueError("duration must be positive")
    if isinstance(timestamp, np.ndarray):
        age = (np.uint64(now) - timestamp.astype(np.uint64)).astype(np.float64)
    else:
        age = float(int(now) - int(timestamp))
    return viewport.width - age * viewport.width / float(duration)


def map_y(value, viewport: Viewport):
    """Higher values map upward. Out-of-range values are not clamped."""
    if isinstance(value, np.ndarray):
        value = value.astype(np.float64)
    else:
        value = float(value)
    return (1.0 - (value - viewport.lower) / viewport.span) * viewport.height
