from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from ..config import get_settings

_INITIALIZED = False


def configure_logging(*, level: Optional[str] = None) -> None:
    """Configure application-wide logging with both file and console handlers."""

    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings().logging
    resolved_level = getattr(logging, (level or settings.level).upper(), logging.INFO)
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    log_path = settings.log_dir / "wushu_calendar.log"

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(str(log_path), maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(resolved_level)
    root.addHandler(file_handler)
    root.addHandler(console_handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_path)
