from __future__ import annotations

from typing import Sequence

from PySide6 import QtWidgets

from core.cursor import CursorReadout
from ui.hover_utils import format_channel_readout, format_cursor_time, format_cursor_value


class ReadoutPanel(QtWidgets.QFrame):
    """Per-channel highlighted values on the left, cursor time/value on the right."""

    def __init__(
        self,
        channel_colors: Sequence[str],
        *,
        text_color: str | None = None,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("readoutPanel")

        self.channel_labels: list[QtWidgets.QLabel] = []
        channel_layout = QtWidgets.QVBoxLayout()
        channel_layout.setContentsMargins(0, 0, 0, 0)
        channel_layout.setSpacing(2)
        for idx, color in enumerate(channel_colors):
            label = QtWidgets.QLabel(format_channel_readout(idx, None), self)
            label.setStyleSheet(f"color: {color};")
            channel_layout.addWidget(label)
            self.channel_labels.append(label)
        channel_layout.addStretch(1)

        self.cursor_time_label = QtWidgets.QLabel("Cursor t: ---", self)
        self.cursor_value_label = QtWidgets.QLabel("Cursor v: ---", self)
        if text_color:
            for label in (self.cursor_time_label, self.cursor_value_label):
                label.setStyleSheet(f"color: {text_color};")
        cursor_layout = QtWidgets.QVBoxLayout()
        cursor_layout.setContentsMargins(0, 0, 0, 0)
        cursor_layout.setSpacing(2)
        cursor_layout.addWidget(self.cursor_time_label)
        cursor_layout.addWidget(self.cursor_value_label)
        cursor_layout.addStretch(1)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(10, 4, 10, 4)
        layout.addLayout(channel_layout, 1)
        layout.addLayout(cursor_layout, 1)

    def set_channel_values(self, values: Sequence[float | None]) -> None:
        for idx, (label, value) in enumerate(zip(self.channel_labels, values)):
            label.setText(format_channel_readout(idx, value))

    def set_cursor(self, cursor: CursorReadout) -> None:
        self.cursor_time_label.setText(format_cursor_time(cursor))
        self.cursor_value_label.setText(format_cursor_value(cursor))
