from __future__ import annotations

import logging
import os
from typing import Any, Optional

LOG_LEVEL_ENV = "BEATMAP_CORE_LOG_LEVEL"


def _parse_level(s: Optional[str]) -> Optional[int]:
    if not s:
        return None
    v = str(s).strip().upper()
    if not v:
        return None
    mapping = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    return mapping.get(v)


def resolve_level(args: Any = None) -> int:
    """Pick the log level.

    Priority (highest first):
    - env BEATMAP_CORE_LOG_LEVEL
    - CLI flags: --quiet / --verbose (if present on args)
    - default: INFO
    """
    quiet = bool(getattr(args, "quiet", False)) if args is not None else False
    verbose = bool(getattr(args, "verbose", False)) if args is not None else False

    level = logging.INFO
    if quiet:
        level = logging.WARNING
    if verbose:
        level = logging.DEBUG

    env_level = _parse_level(os.environ.get(LOG_LEVEL_ENV))
    if env_level is not None:
        level = env_level
    return level


def setup_logging(args: Any = None, *, name: str = "beatmap_core") -> None:
    """Configure python logging once; does nothing if handlers already exist."""

    root = logging.getLogger()
    if root.handlers:
        return

    level = resolve_level(args)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%H:%M:%S"

    logging.basicConfig(level=level, format=fmt, datefmt=datefmt)

    logging.getLogger(name).debug(
        "logging initialized (level=%s)",
        logging.getLevelName(level),
    )
