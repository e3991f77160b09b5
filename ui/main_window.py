# ui/main_window.py
from __future__ import annotations

import logging

import pyqtgraph as pg
from PySide6 import QtCore, QtGui, QtWidgets

from config import PlotterConfig
from core.frame import FrameSnapshot, build_frame
from core.session import ByteSource, PlotSession
from core.viewport import Viewport
from ui.hover_utils import format_header
from ui.themes import DEFAULT_THEME, THEMES, ThemeDefinition
from ui.widgets import ReadoutPanel


LOG = logging.getLogger(__name__)

MARKER_SIZE = 6
HEADER_MARGIN = 10


class MainWindow(QtWidgets.QMainWindow):
    """Single-loop plotter: every timer tick drains the source, then redraws.

    The plot's view range is pinned to the viewbox size in pixels with y
    inverted, so viewport-relative coordinates from :mod:`core.viewport` are
    drawn as-is.
    """

    def __init__(
        self,
        source: ByteSource,
        *,
        config: PlotterConfig | None = None,
        session: PlotSession | None = None,
    ):
        super().__init__()
        self.source = source
        self._config = config or PlotterConfig()
        self.session = session or PlotSession.from_config(self._config)
        self.curves: list[pg.PlotDataItem] = []
        self.markers: list[pg.ScatterPlotItem] = []
        self._last_frame: FrameSnapshot | None = None
        self._view_size: tuple[float, float] | None = None

        theme_key = getattr(self._config, "theme", DEFAULT_THEME)
        if theme_key not in THEMES:
            LOG.warning("Unknown theme %r; using %s", theme_key, DEFAULT_THEME)
            theme_key = DEFAULT_THEME
        self._config.theme = theme_key
        self._theme: ThemeDefinition = THEMES[theme_key]

        pg.setConfigOptions(antialias=False, foreground=self._theme.pg_foreground)
        self.setWindowTitle(f"plotty: {self._config.port}")

        self._build_ui()
        self._connect_signals()

        self.timer = QtCore.QTimer(self)
        self.timer.setInterval(max(1, int(1000 / self._config.target_fps)))
        self.timer.timeout.connect(self.tick)
        self.timer.start()

    # ----- UI construction -------------------------------------------------

    def _build_ui(self):
        theme = self._theme
        self.setStyleSheet(theme.stylesheet)

        central = QtWidgets.QWidget()
        vbox = QtWidgets.QVBoxLayout(central)
        vbox.setContentsMargins(HEADER_MARGIN, HEADER_MARGIN, HEADER_MARGIN, HEADER_MARGIN)
        vbox.setSpacing(6)
        self.setCentralWidget(central)

        header_row = QtWidgets.QHBoxLayout()
        header_row.setContentsMargins(0, 0, 0, 0)
        self.headerLabel = QtWidgets.QLabel()
        self.headerLabel.setObjectName("headerLabel")
        self.headerLabel.setStyleSheet(f"color: {theme.text_color};")
        header_row.addWidget(self.headerLabel, 1)
        self.pausedBadge = QtWidgets.QLabel("PAUSED")
        self.pausedBadge.setObjectName("pausedBadge")
        self.pausedBadge.setVisible(False)
        header_row.addWidget(self.pausedBadge)
        vbox.addLayout(header_row)

        self.plot = pg.PlotWidget(background=theme.pg_background)
        self.plot.setMinimumSize(100, 100)
        plot_item = self.plot.getPlotItem()
        plot_item.hideAxis("left")
        plot_item.hideAxis("bottom")
        plot_item.hideButtons()
        plot_item.setMenuEnabled(False)
        self.viewbox = plot_item.getViewBox()
        self.viewbox.setMouseEnabled(x=False, y=False)
        self.viewbox.invertY(True)
        self.viewbox.enableAutoRange(enable=False)
        self.viewbox.setBorder(pg.mkPen(theme.frame_color, width=1))
        vbox.addWidget(self.plot, 1)

        crosshair_pen = pg.mkPen(theme.crosshair_color, width=1)
        self.crosshair_v = pg.InfiniteLine(angle=90, movable=False, pen=crosshair_pen)
        self.crosshair_h = pg.InfiniteLine(angle=0, movable=False, pen=crosshair_pen)
        for line in (self.crosshair_v, self.crosshair_h):
            line.setZValue(10)
            self.plot.addItem(line, ignoreBounds=True)

        colors = [theme.curve_color(idx) for idx in range(self.session.max_channels)]
        for color in colors:
            curve = self.plot.plot(pen=pg.mkPen(color, width=1))
            curve.setZValue(20)
            self.curves.append(curve)
            marker = pg.ScatterPlotItem(size=MARKER_SIZE, pen=None, brush=pg.mkBrush(color))
            marker.setZValue(30)
            self.plot.addItem(marker)
            self.markers.append(marker)

        self.readouts = ReadoutPanel(colors, text_color=theme.text_color)
        vbox.addWidget(self.readouts)

    def _connect_signals(self):
        self.plot.scene().sigMouseMoved.connect(self._on_mouse_moved)
        QtGui.QShortcut(
            QtGui.QKeySequence(QtCore.Qt.Key_Space), self, activated=self._toggle_pause
        )

    # ----- loop ------------------------------------------------------------

    def current_viewport(self) -> Viewport:
        rect = self.viewbox.boundingRect()
        width = max(1.0, float(rect.width()))
        height = max(1.0, float(rect.height()))
        if self._view_size != (width, height):
            self._view_size = (width, height)
            self.viewbox.setRange(xRange=(0.0, width), yRange=(0.0, height), padding=0)
        return Viewport(
            0.0,
            0.0,
            width,
            height,
            self._config.value_lower,
            self._config.value_upper,
        )

    @QtCore.Slot()
    def tick(self) -> None:
        self.session.ingest(self.source)
        self.render()

    def render(self) -> FrameSnapshot:
        frame = build_frame(self.session, self.current_viewport())
        for trace, curve, marker in zip(frame.channels, self.curves, self.markers):
            curve.setData(trace.xs, trace.ys)
            if trace.highlight_xy is None:
                marker.setData(x=[], y=[])
            else:
                hx, hy = trace.highlight_xy
                marker.setData(x=[hx], y=[hy])

        self.crosshair_v.setValue(frame.cursor.column)
        self.crosshair_h.setValue(frame.cursor.row)
        self.headerLabel.setText(
            format_header(
                display_period_us=frame.display_period_us,
                lower=self._config.value_lower,
                upper=self._config.value_upper,
                port=self._config.port,
                now_us=frame.now,
            )
        )
        self.pausedBadge.setVisible(self.session.paused)
        self.readouts.set_channel_values(frame.highlighted_values)
        self.readouts.set_cursor(frame.cursor)
        self._last_frame = frame
        return frame

    @property
    def last_frame(self) -> FrameSnapshot | None:
        return self._last_frame

    # ----- input -----------------------------------------------------------

    def _on_mouse_moved(self, scene_pos: QtCore.QPointF) -> None:
        point = self.viewbox.mapSceneToView(scene_pos)
        self.session.set_pointer(float(point.x()), float(point.y()))

    def _toggle_pause(self) -> None:
        self.session.toggle_pause()
        self.statusBar().showMessage("Paused" if self.session.paused else "Resumed", 2000)

    def closeEvent(self, event):
        self.timer.stop()
        close_fn = getattr(self.source, "close", None)
        if callable(close_fn):
            close_fn()
        self._config.save()
        super().closeEvent(event)
