"""
Configuration
=============
Immutable settings for one interactive session.

Why is this file needed?
------------------------
1. One place for the fractal constants (leaf threshold, scene side, stereo
   separation, parallax, scroll sensitivity, colours).
2. Mode-dependent defaults are resolved once at startup and the resulting
   value is handed to the Scene. Nothing reads global mutable state.

Exports:
    Mode: Presentation mode (mono, real 3D, anaglyph).
    Viewport: Logical drawing area and its device-pixel ratio.
    TetrixConfig: The resolved constants.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class Mode(StrEnum):
    """How many cameras are drawn and how they are separated."""
    MONO = "mono"
    REAL_3D = "real-3d"
    ANAGLYPH = "anaglyph"

    @property
    def is_stereo(self) -> bool:
        return self is not Mode.MONO


def resolve_mode(real_3d: bool = False, anaglyph: bool = False) -> Mode:
    """Anaglyph overrides real 3D."""
    if anaglyph:
        return Mode.ANAGLYPH
    if real_3d:
        return Mode.REAL_3D
    return Mode.MONO


# Defaults
MIN_SIDE_MONO: float = 30.0
MIN_SIDE_STEREO: float = 10.0
SIDE_REAL_3D: float = 240.0
CAMERA_SEPARATION: float = 220.0
PARALLAX: float = 0.04
ROTATION_PER_SCROLL_UNIT: float = math.pi / 360
COLOUR: str = "rgba(102,102,153,0.5)"
ANAGLYPH_COLOURS: tuple[str, str] = ("rgba(255,0,0,0.5)", "rgba(0,255,255,0.5)")


def _check_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive finite number, got {value!r}")


@dataclass(frozen=True)
class Viewport:
    """Logical size of the drawing area, plus the device-pixel ratio."""
    width: float
    height: float
    scale: float = 1.0

    def __post_init__(self) -> None:
        _check_positive("width", self.width)
        _check_positive("height", self.height)
        _check_positive("scale", self.scale)

    @property
    def centre(self) -> tuple[float, float, float]:
        return self.width / 2, self.height / 2, 0.0

    @property
    def device_size(self) -> tuple[int, int]:
        """Size in physical pixels."""
        return round(self.width * self.scale), round(self.height * self.scale)


@dataclass(frozen=True)
class TetrixConfig:
    """
    Resolved constants. Build it with `for_mode` unless every value is
    known up front.
    """
    mode: Mode = Mode.MONO
    side: float = 480.0
    min_side: float = MIN_SIDE_MONO
    camera_separation: float = 0.0
    parallax: float = PARALLAX
    rotation_per_scroll_unit: float = ROTATION_PER_SCROLL_UNIT
    colour: str = COLOUR
    anaglyph_colours: tuple[str, str] = field(default=ANAGLYPH_COLOURS)

    def __post_init__(self) -> None:
        _check_positive("side", self.side)
        _check_positive("min_side", self.min_side)
        if not math.isfinite(self.camera_separation) or self.camera_separation < 0:
            raise ValueError(f"camera_separation must be >= 0, got {self.camera_separation!r}")
        if not math.isfinite(self.parallax):
            raise ValueError(f"parallax must be finite, got {self.parallax!r}")
        if not math.isfinite(self.rotation_per_scroll_unit):
            raise ValueError(
                f"rotation_per_scroll_unit must be finite, got {self.rotation_per_scroll_unit!r}"
            )
        if self.mode is Mode.ANAGLYPH and len(self.anaglyph_colours) != 2:
            raise ValueError("Anaglyph mode needs exactly two colours.")

    @classmethod
    def for_mode(cls, mode: Mode, viewport: Viewport, **overrides: Any) -> TetrixConfig:
        """
        Fill in the mode-dependent defaults, then apply `overrides`.

        Mono fits the fractal to half the viewport width. The stereo modes
        draw two trees at the finer threshold, so they use a fixed side.
        """
        mode = Mode(mode)
        defaults: dict[str, Any] = {
            "mode": mode,
            "side": SIDE_REAL_3D if mode.is_stereo else viewport.width / 2,
            "min_side": MIN_SIDE_STEREO if mode.is_stereo else MIN_SIDE_MONO,
            "camera_separation": CAMERA_SEPARATION if mode is Mode.REAL_3D else 0.0,
        }
        defaults.update({k: v for k, v in overrides.items() if v is not None})
        if mode is Mode.ANAGLYPH and defaults["camera_separation"]:
            logger.warning("Anaglyph mode ignores camera separation.")
            defaults["camera_separation"] = 0.0
        return cls(**defaults)
