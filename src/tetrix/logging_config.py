"""
Logging Configuration
Sets up the global logger for the application.

Every wheel event logs one DEBUG line per tree, which drowns out everything
else, so those per-frame loggers stay at INFO unless frame logs are asked for.
"""
import logging
import sys
from typing import Optional

# Loggers that write once per drawn frame
FRAME_LOGGERS: tuple[str, ...] = ("tetrix.model.tree",)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    frame_logs: bool = False,
) -> logging.Logger:
    """
    Configures the root logger for the 'tetrix' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        frame_logs: Let the per-frame loggers through at `level` as well.
    """
    logger = logging.getLogger("tetrix")
    logger.setLevel(level)

    # Avoid duplicate handlers when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name in FRAME_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if frame_logs else max(level, logging.INFO))

    logger.info(f"Logging initialized ({logging.getLevelName(level)}, frame logs {'on' if frame_logs else 'off'}).")
    return logger
