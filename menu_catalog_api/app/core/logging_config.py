"""Root logger setup for the menu service (console plus optional ``LOG_FILE``)."""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Install the menu service's handlers on the root logger.

    Does nothing if the root logger already has handlers, so building
    several apps in one process (the test suite does) configures
    logging once.  ``level`` is a level name such as ``"DEBUG"``;
    unknown names fall back to ``INFO``.  ``logfile``, when given, adds
    a UTF-8 file handler with the same format as the console.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
