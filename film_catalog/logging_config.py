"""
Logging configuration.

``setup_logging`` attaches a console handler (and optionally a
file handler) to the root logger. Modules log through
``logging.getLogger(__name__)`` and never configure handlers
themselves.
"""

import logging
from pathlib import Path


def setup_logging(level: str = "INFO", logfile: str | None = None) -> None:
    """
    Configure the root logger exactly once.

    If the root logger already has handlers (uvicorn, pytest, a
    second call to this function) nothing is changed.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(
            Path(logfile).resolve(), encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
