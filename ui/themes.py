"""Theme definitions for the plotter window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeDefinition:
    """Palette configuration for the plotter.

    Parameters
    ----------
    name:
        Human-friendly display name for the theme.
    pg_background / pg_foreground:
        Colors applied to PyQtGraph backgrounds/foregrounds.
    stylesheet:
        Application stylesheet snippet tailored to this palette.
    curve_colors:
        Sequence of colors used for channel traces, cycled per channel.
    frame_color:
        Pen color for the viewport outline.
    crosshair_color:
        Pen color for the pointer crosshair.
    text_color:
        Header and cursor readout text.
    """

    name: str
    pg_background: str
    pg_foreground: str
    stylesheet: str
    curve_colors: tuple[str, ...]
    frame_color: str
    crosshair_color: str
    text_color: str

    def curve_color(self, channel: int) -> str:
        return self.curve_colors[channel % len(self.curve_colors)]


STYLESHEET_TEMPLATE = """
QMainWindow {{ background-color: {window_bg}; color: {text_primary}; }}
QLabel {{ font-size: 15px; color: {text_primary}; }}
QLabel#headerLabel {{ font-size: 17px; }}
QLabel#pausedBadge {{ color: {badge_text}; font-weight: 600; }}
"""


def _make_stylesheet(palette: dict[str, str]) -> str:
    return STYLESHEET_TEMPLATE.format(**palette)


DEFAULT_THEME = "Midnight"


THEMES: dict[str, ThemeDefinition] = {
    "Midnight": ThemeDefinition(
        name="Midnight",
        pg_background="#000000",
        pg_foreground="#f5f5f5",
        stylesheet=_make_stylesheet(
            {
                "window_bg": "#000000",
                "text_primary": "#f5f5f5",
                "badge_text": "#f0b429",
            }
        ),
        curve_colors=(
            "#e62937",  # red
            "#00e430",  # green
            "#0079f1",  # blue
            "#fdf900",  # yellow
            "#c87aff",  # purple
            "#ffa100",  # orange
        ),
        frame_color="#f5f5f5",
        crosshair_color="#828282",
        text_color="#f5f5f5",
    ),
    "Dawn": ThemeDefinition(
        name="Dawn",
        pg_background="#F7F9FC",
        pg_foreground="#0F172A",
        stylesheet=_make_stylesheet(
            {
                "window_bg": "#F7F9FC",
                "text_primary": "#0F172A",
                "badge_text": "#B45309",
            }
        ),
        # readable on a light canvas
        curve_colors=(
            "#DC2626",
            "#059669",
            "#1D4ED8",
            "#B45309",
            "#9333EA",
            "#0EA5E9",
        ),
        frame_color="#334155",
        crosshair_color="#94A3B8",
        text_color="#0F172A",
    ),
}
