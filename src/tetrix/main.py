"""
Application Initialization
==========================
Parses the command line, sets up logging and starts the Qt event loop.

The presentation mode is read once here and never re-evaluated.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from tetrix.config import Mode, resolve_mode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tetrix",
        description="Rotatable Sierpinski tetrahedron. Scroll to rotate.",
    )
    parser.add_argument("--real-3d", action="store_true",
                        help="two cameras side by side (cross-eye stereo)")
    parser.add_argument("--anaglyph", action="store_true",
                        help="red/cyan stereo; overrides --real-3d")
    parser.add_argument("--side", type=float, default=None,
                        help="side length of the whole fractal, in pixels")
    parser.add_argument("--min-side", type=float, default=None,
                        help="stop subdividing at this side length")
    parser.add_argument("--separation", type=float, default=None,
                        help="distance between the two real-3D cameras, in pixels")
    parser.add_argument("--parallax", type=float, default=None,
                        help="initial Y rotation of each stereo camera, in radians")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--frame-logs", action="store_true",
                        help="with --debug, also log every drawn frame")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> tuple[Mode, dict[str, Any], argparse.Namespace]:
    """
    Returns:
        The resolved mode, the config overrides given on the command line,
        and the raw namespace.
    """
    args = build_parser().parse_args(argv)
    mode = resolve_mode(real_3d=args.real_3d, anaglyph=args.anaglyph)
    overrides = {
        "side": args.side,
        "min_side": args.min_side,
        "camera_separation": args.separation,
        "parallax": args.parallax,
    }
    return mode, {k: v for k, v in overrides.items() if v is not None}, args


def main(argv: Optional[Sequence[str]] = None) -> int:
    mode, overrides, args = parse_args(argv)

    # Qt is imported late so that --help works without a display
    from tetrix.logging_config import setup_logging
    from tetrix.app.application import create_app
    from tetrix.view.main_window import MainWindow

    logger = setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO,
        log_file=args.log_file,
        frame_logs=args.frame_logs,
    )
    logger.info(f"Starting in {mode} mode")

    app = create_app([sys.argv[0]])
    window = MainWindow(mode=mode, overrides=overrides)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
