from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List
import os


_configured = False
_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def _ensure_base_logger() -> None:
    global _configured
    if _configured:
        return
    level = getattr(logging, os.getenv("BOOKBUILD_LOG_LEVEL", "INFO").upper(), logging.INFO)
    logging.basicConfig(level=level, format=_FORMAT)
    # basicConfig is a no-op when the root already has handlers
    logging.getLogger().setLevel(level)
    _configured = True


def get_logger(name: str, log_file: Path | None = None) -> logging.Logger:
    """Named logger; `log_file` also routes every build record into that file."""
    _ensure_base_logger()
    if log_file:
        log_to_file(log_file)
    return logging.getLogger(name)


def log_to_file(log_file: Path) -> RotatingFileHandler:
    """Attach a rotating file handler to the root logger.

    Task, staging, converter and tool loggers all propagate to the root, so
    the file sees the whole run. Attaching the same path twice reuses the
    existing handler.
    """
    _ensure_base_logger()
    target = str(Path(log_file).resolve())
    root = logging.getLogger()
    for h in root.handlers:
        if isinstance(h, RotatingFileHandler) and h.baseFilename == target:
            return h
    Path(target).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(target, maxBytes=1_000_000, backupCount=3)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    return handler


def detach(handler: logging.Handler) -> None:
    logging.getLogger().removeHandler(handler)
    handler.close()


def active_log_files() -> List[Path]:
    """Files currently written by handlers on the root logger."""
    return [
        Path(h.baseFilename)
        for h in logging.getLogger().handlers
        if isinstance(h, logging.FileHandler)
    ]
