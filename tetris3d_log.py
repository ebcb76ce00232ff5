"""Logging setup for the tetris3d modules"""
import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "tetris3d"


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'tetris3d' logger namespace.

    Modules obtain their loggers through ``get_logger`` so that records end up
    under this namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to also write logs to a file.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers when the game restarts in-process
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Child logger of the 'tetris3d' namespace, e.g. 'tetris3d.board' for tetris3d_board."""
    suffix = module_name.split("tetris3d_", 1)[-1]
    return logging.getLogger(f"{LOGGER_NAME}.{suffix}")
