"""Headless smoke tests for the PySide6 plotter window."""

from __future__ import annotations

import os

import pytest

try:  # pragma: no cover - environment-dependent import guard
    from PySide6 import QtWidgets
except ImportError as exc:  # pragma: no cover - skip when Qt dependencies missing
    pytest.skip(f"PySide6 import failed: {exc}", allow_module_level=True)

from config import PlotterConfig
from core.session import RunState


# Ensure the tests run with Qt's offscreen platform.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qt_app():
    """Provide a global QApplication for headless UI tests."""

    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app
    app.quit()


class FakeByteSource:
    """Deterministic stand-in for the serial port."""

    def __init__(self, chunks: list[bytes]):
        self.chunks = list(chunks)
        self.closed = False

    def read(self, size: int) -> bytes:
        if not self.chunks:
            return b""
        return self.chunks.pop(0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def window(qt_app):
    from ui.main_window import MainWindow

    cfg = PlotterConfig(max_channels=2, display_period_us=2000, value_lower=0.0, value_upper=4.0)
    source = FakeByteSource([b"1000:1.0;2.0\n", b"2000:1.5;2.5\n", b"3000:2.0;3.0\n"])
    w = MainWindow(source, config=cfg)
    w.timer.stop()
    w.resize(800, 600)
    w.show()
    qt_app.processEvents()
    yield w
    w.close()


def test_tick_ingests_and_renders(window):
    window.tick()
    frame = window.last_frame
    assert frame is not None
    assert frame.now == 3000
    assert frame.channels[0].timestamps.tolist() == [1000, 2000, 3000]
    assert len(window.curves) == 2
    x_data, y_data = window.curves[0].getData()
    assert len(x_data) == 3
    assert "board time: 0.003s" in window.headerLabel.text()
    assert not window.pausedBadge.isVisibleTo(window)


def test_pointer_at_right_edge_highlights_latest(window):
    window.tick()
    viewport = window.current_viewport()
    window.session.set_pointer(viewport.width, 0.0)
    frame = window.render()
    assert frame.highlighted_values == [2.0, 3.0]
    assert window.readouts.channel_labels[0].text() == "Channel 0: 2.000"
    assert window.readouts.cursor_time_label.text() == "Cursor t: 0.000s"


def test_pause_toggle_blocks_commits(window):
    window._toggle_pause()
    assert window.session.state is RunState.PAUSED
    window.tick()
    assert window.session.ring.total_writes == 0
    assert window.pausedBadge.isVisibleTo(window)
    window._toggle_pause()
    window.render()
    assert not window.pausedBadge.isVisibleTo(window)


def test_close_stops_timer_and_source(qt_app):
    from ui.main_window import MainWindow

    source = FakeByteSource([])
    w = MainWindow(source, config=PlotterConfig())
    w.show()
    qt_app.processEvents()
    w.close()
    qt_app.processEvents()
    assert not w.timer.isActive()
    assert source.closed


def test_theme_text_color_applies_to_labels(window):
    color = window._theme.text_color
    assert color in window.headerLabel.styleSheet()
    assert color in window.readouts.cursor_time_label.styleSheet()
    assert color in window.readouts.cursor_value_label.styleSheet()
