"""Debug log setup; Textual owns the terminal so everything goes to a file."""

from __future__ import annotations

import logging
from pathlib import Path

from bakery_pos.config import LOG_LEVEL, LOG_PATH

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(log_path: str = LOG_PATH, level: str = LOG_LEVEL) -> None:
    root = logging.getLogger("bakery_pos")
    if root.handlers:
        return
    try:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        # Unwritable log location must not keep the till from starting.
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())
