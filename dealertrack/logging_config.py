"""
Logging setup driven by ``Settings``.
"""
import logging
from pathlib import Path

from dealertrack.config import Settings


def setup_logging(settings: Settings) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Runs once per process: a root logger that already has handlers, e.g.
    one configured by uvicorn or a test runner, is left alone.  An unknown
    ``log_level`` falls back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=settings.log_format, datefmt=settings.log_date_format)

    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
