#===============================================================================
#  TaskLauncher | main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  The launcher window. It owns no layout logic: it renders a LayoutResult,
#  re-applies it (recentered) on resize, and routes every button click
#  through one slot that looks the action up by button id.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from PySide6.QtGui import QFont, QFontMetrics, QIcon
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStyle,
    QWidget,
)

from .constants import APP_TITLE, FIT_BOTTOM_PADDING
from .launcher import LaunchController
from .layout import BUTTON_FONT, compute_layout, dispatch_table
from .models import Configuration, FontSpec, LabelDescriptor, LayoutResult, Rect

log = logging.getLogger(__name__)

ICON_FILE_NAMES = ("app.ico", "app.png")


def to_qfont(spec: FontSpec) -> QFont:
    f = QFont()
    f.setStyleHint(QFont.SansSerif)
    f.setFamily(f.defaultFamily())
    f.setPointSizeF(spec.size)
    f.setBold(spec.bold)
    return f


class QtTextMeasurer:
    """TextMeasurer backed by QFontMetrics."""

    def measure(self, text: str, font: FontSpec) -> Tuple[int, int]:
        fm = QFontMetrics(to_qfont(font))
        return fm.horizontalAdvance(text), fm.height()


def load_app_icon(base_dir: Path) -> Optional[QIcon]:
    """Icon next to the program, else the platform's computer icon."""
    for name in ICON_FILE_NAMES:
        p = Path(base_dir) / name
        if p.exists():
            icon = QIcon(str(p))
            if not icon.isNull():
                return icon
    icon = QApplication.style().standardIcon(QStyle.SP_ComputerIcon)
    return None if icon.isNull() else icon


def _place(widget: QWidget, rect: Rect) -> None:
    widget.setGeometry(rect.left, rect.top, rect.width, rect.height)


class LauncherWindow(QMainWindow):
    def __init__(self, config: Optional[Configuration], controller: LaunchController,
                 icon: Optional[QIcon] = None):
        super().__init__()
        self.config = config
        self.controller = controller
        self.icon = icon
        self.measurer = QtTextMeasurer()
        self.layout_result: Optional[LayoutResult] = None

        self._icon_label: Optional[QLabel] = None
        self._left_label: Optional[QLabel] = None
        self._right_label: Optional[QLabel] = None
        self._buttons: Dict[str, QPushButton] = {}
        self.dispatch = dispatch_table(config) if config is not None else {}

        self.setWindowTitle(config.window.title if config is not None else APP_TITLE)
        if icon is not None:
            self.setWindowIcon(icon)

        self.canvas = QWidget()
        self.setCentralWidget(self.canvas)

        if config is None:
            return

        self.resize(config.window.width, config.window.height)
        self.layout_result = compute_layout(
            config, config.window.width, self.measurer, has_icon=icon is not None
        )
        self._build_widgets(self.layout_result)
        self._apply(self.layout_result)

        if config.window.fit_to_content:
            self.resize(self.width(), self.layout_result.content_bottom + FIT_BOTTOM_PADDING)

    # ----------------------------
    # Rendering
    # ----------------------------
    def _make_label(self, desc: LabelDescriptor) -> QLabel:
        label = QLabel(desc.text, self.canvas)
        label.setFont(to_qfont(desc.font))
        return label

    def _build_widgets(self, result: LayoutResult) -> None:
        header = result.header
        if header is not None:
            if header.icon is not None and self.icon is not None:
                self._icon_label = QLabel(self.canvas)
                self._icon_label.setScaledContents(True)
                self._icon_label.setPixmap(self.icon.pixmap(header.icon.width, header.icon.height))
            self._left_label = self._make_label(header.left_label)
            self._right_label = self._make_label(header.right_label)

        button_font = to_qfont(BUTTON_FONT)
        for desc in result.buttons:
            btn = QPushButton(desc.text, self.canvas)
            btn.setFont(button_font)
            btn.clicked.connect(lambda _checked=False, bid=desc.button_id: self.on_button_clicked(bid))
            self._buttons[desc.button_id] = btn

    def _apply(self, result: LayoutResult) -> None:
        header = result.header
        if header is not None:
            if self._icon_label is not None and header.icon is not None:
                _place(self._icon_label, header.icon)
            if self._left_label is not None:
                _place(self._left_label, header.left_label.rect)
            if self._right_label is not None:
                _place(self._right_label, header.right_label.rect)
        for desc in result.buttons:
            _place(self._buttons[desc.button_id], desc.rect)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.layout_result is None:
            return
        width = self.canvas.width()
        if width != self.layout_result.viewport_width:
            self.layout_result = self.layout_result.recentered(width)
            self._apply(self.layout_result)

    # ----------------------------
    # Dispatch
    # ----------------------------
    def on_button_clicked(self, button_id: str) -> None:
        spec = self.dispatch.get(button_id)
        if spec is None:
            log.warning("Click on unknown button id %r", button_id)
            return

        outcome = self.controller.launch(spec)
        if outcome.close_window:
            self.close()
            QApplication.quit()
            return

        if outcome.show_error and outcome.error is not None:
            QMessageBox.critical(self, outcome.error.title, outcome.error.message)
        self.controller.reset()
