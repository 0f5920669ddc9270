"""Centralized logging configuration for canirun.

Usage in any module:
    from canirun.utils.logging import get_logger
    logger = get_logger(__name__)
    logger.debug("GPU requirement matched %s", name)

The comparison core only logs at DEBUG; loaders and HTTP clients log at
INFO/WARNING.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

_CONFIGURED = False

LOG_DIR = Path(__file__).resolve().parents[3] / "logs"
LOG_FILE = LOG_DIR / "canirun.log"
LOG_LEVEL_ENV = "CANIRUN_LOG_LEVEL"


class SafeStreamHandler(logging.StreamHandler):
    """StreamHandler that falls back to escaped output on encoding errors."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            stream = self.stream
            encoding = getattr(stream, "encoding", None) or "utf-8"
            try:
                stream.write(msg + self.terminator)
            except UnicodeEncodeError:
                stream.write(
                    msg.encode(encoding, errors="backslashreplace").decode(encoding) + self.terminator
                )
            self.flush()
        except Exception:
            self.handleError(record)


def _level_from_env(default: int) -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Path] = None,
) -> None:
    """Configure the ``canirun`` logger (stderr console + optional file).

    Only the first call has an effect. ``CANIRUN_LOG_LEVEL`` overrides
    ``level`` for the console handler.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    root = logging.getLogger("canirun")
    root.setLevel(logging.DEBUG)

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # stderr keeps CLI table/JSON output on stdout clean
    console = SafeStreamHandler(sys.stderr)
    console.setLevel(_level_from_env(level))
    console.setFormatter(fmt)
    root.addHandler(console)

    target = log_file or LOG_FILE
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(target, encoding="utf-8", delay=True)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)
    except OSError:
        # read-only install location; console logging still works
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring the ``canirun`` tree on first use."""
    setup_logging()
    return logging.getLogger(name)


def set_console_level(level: int) -> None:
    """Change the console threshold after setup (e.g. for ``--debug``)."""
    setup_logging()
    for handler in logging.getLogger("canirun").handlers:
        if isinstance(handler, SafeStreamHandler):
            handler.setLevel(level)
