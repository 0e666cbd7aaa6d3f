"""
Main Application Window
=======================
A single canvas plus a status bar with the mode and the leaf count.
"""
from __future__ import annotations

from typing import Any

from PySide6.QtWidgets import QLabel, QMainWindow

from tetrix.config import Mode
from tetrix.view.canvas import TetrixCanvas

VISIBLE_APP_NAME = "Tetrix"


class MainWindow(QMainWindow):
    def __init__(self, mode: Mode = Mode.MONO, overrides: dict[str, Any] | None = None) -> None:
        super().__init__()
        self.setWindowTitle(f"{VISIBLE_APP_NAME} ({mode})")
        self.resize(1200, 800)

        self.canvas = TetrixCanvas(mode=mode, overrides=overrides, parent=self)
        self.setCentralWidget(self.canvas)

        self.leaf_label = QLabel()
        self.statusBar().addPermanentWidget(self.leaf_label)
        self.statusBar().showMessage("Scroll to rotate")
        self.canvas.frame_drawn.connect(self._on_frame_drawn)

    def _on_frame_drawn(self, leaves: int) -> None:
        self.leaf_label.setText(f"{leaves} pyramids")
