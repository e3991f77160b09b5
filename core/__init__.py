"""Core package exports for the serial plotter."""

# Re-export commonly used modules for convenience.
from . import cursor, frame, line_parser, ring_buffer, serial_source, session, view_window, viewport

__all__ = [
    "cursor",
    "frame",
    "line_parser",
    "ring_buffer",
    "serial_source",
    "session",
    "view_window",
    "viewport",
]
