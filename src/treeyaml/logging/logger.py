"""
Centralized logging configuration for treeyaml.

Every module asks ``get_logger(__name__)`` for its logger. All of them hang
below the ``treeyaml`` base logger, which is configured once from the
``logging`` section of ``config/treeyaml.yml``:

* ``level``      console and file level (``debug: true`` forces DEBUG)
* ``to_file``    also write ``<dir>/<file>``
* ``rotate``     use a size-rotated file instead of a plain one
* ``per_module`` add ``<dir>/<module>.log`` for each module logger
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from treeyaml.config import get_config

BASE_LOGGER_NAME = "treeyaml"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

# Resolved from config on the first get_logger() call.
_settings: Optional[Dict[str, Any]] = None


def _load_settings() -> Dict[str, Any]:
    global _settings
    if _settings is not None:
        return _settings

    cfg = get_config()
    section = cfg.logging
    level_name = str(section.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    if cfg.debug:
        level = logging.DEBUG

    _settings = {
        "level": level,
        "to_file": bool(section.get("to_file", False)),
        "per_module": bool(section.get("per_module", False)),
        "rotate": bool(section.get("rotate", False)),
        "dir": Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs"),
        "file": section.get("file") or "treeyaml.log",
    }
    return _settings


def _file_handler(filename: str, settings: Dict[str, Any]) -> logging.Handler:
    log_dir: Path = settings["dir"]
    log_dir.mkdir(parents=True, exist_ok=True)
    path = log_dir / filename

    if settings["rotate"]:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(settings["level"])
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _base_logger(settings: Dict[str, Any]) -> Logger:
    base = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(base, "treeyaml_configured", False):
        return base

    base.setLevel(settings["level"])
    base.propagate = False

    console = StreamHandler()
    console.setLevel(settings["level"])
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base.addHandler(console)

    if settings["to_file"]:
        base.addHandler(_file_handler(settings["file"], settings))

    base.treeyaml_configured = True  # type: ignore[attr-defined]
    return base


def get_logger(name: str | None = None) -> Logger:
    """Return a logger under the shared ``treeyaml`` base logger.

    Names outside the ``treeyaml`` namespace are nested under it, so every
    logger reaches the base console (and master file) handlers.
    """
    settings = _load_settings()
    base = _base_logger(settings)

    logger_name = name or BASE_LOGGER_NAME
    if logger_name == BASE_LOGGER_NAME:
        return base
    if not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    logger.setLevel(settings["level"])
    logger.propagate = True

    has_module_file = any(getattr(h, "is_module_handler", False) for h in logger.handlers)
    if settings["per_module"] and not has_module_file:
        handler = _file_handler(f"{logger_name.replace('.', '_')}.log", settings)
        handler.is_module_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
