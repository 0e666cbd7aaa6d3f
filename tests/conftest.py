"""Pytest configuration and fixtures for tetrix tests."""
from __future__ import annotations

import os

import pytest


class RecordingSurface:
    """DrawingSurface that keeps every filled polygon instead of painting it."""

    def __init__(self) -> None:
        self.polygons: list[list[tuple[float, float]]] = []
        self.colours: list[str] = []
        self.clears: list[tuple[float, float, float, float]] = []
        self.calls: list[str] = []
        self._path: list[tuple[float, float]] = []

    def begin_path(self) -> None:
        self.calls.append("begin_path")
        self._path = []

    def move_to(self, x: float, y: float) -> None:
        self.calls.append("move_to")
        self._path.append((x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append("line_to")
        self._path.append((x, y))

    def fill(self, colour: str) -> None:
        self.calls.append("fill")
        self.polygons.append(self._path)
        self.colours.append(colour)

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.calls.append("clear_rect")
        self.clears.append((x, y, width, height))


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture(scope="session")
def qapp():
    """A QApplication on the offscreen platform, shared by all Qt tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
