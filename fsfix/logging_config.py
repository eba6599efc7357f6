"""Package logging setup: console plus optional rotating file.

Call ``setup_logging()`` to see fixture activity.  Only the ``fsfix`` logger
is configured; records still propagate, so the host's handlers (pytest's
``caplog`` among them) keep receiving them.
"""

from __future__ import annotations

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from fsfix.log_context import ContextFilter

MAX_BYTES = 5 * 1024 * 1024  # 5 MB per file
BACKUP_COUNT = 3

PACKAGE_LOGGER = "fsfix"
LOG_FILENAME = "fsfix.log"

CONSOLE_FMT = "%(asctime)s %(levelname)-8s %(name)s: %(ctx)s%(message)s"
FILE_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(ctx)s%(message)s"

logger = logging.getLogger(__name__)

_queue_listener: QueueListener | None = None
_atexit_registered: bool = False


def _stop_queue_listener() -> None:
    global _queue_listener  # noqa: PLW0603
    if _queue_listener is not None:
        _queue_listener.stop()
        _queue_listener = None


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    named = logging.getLevelName(level.upper())
    return named if isinstance(named, int) else logging.INFO


def setup_logging(
    level: int | str = logging.INFO,
    verbose: bool = False,
    log_dir: Path | None = None,
) -> None:
    """Configure the ``fsfix`` logger with a console and optional rotating file handler.

    Args:
        level: Minimum log level, as an int or a level name like ``"DEBUG"``.
            Unknown names fall back to INFO.
        verbose: If True, forces DEBUG level.
        log_dir: Directory for ``fsfix.log``. If None, file logging is skipped.
    """
    resolved = logging.DEBUG if verbose else _resolve_level(level)

    _stop_queue_listener()

    ctx_filter = ContextFilter()
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(resolved)
    pkg.handlers.clear()

    if sys.stderr is not None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(resolved)
        console_handler.addFilter(ctx_filter)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FMT, datefmt="%H:%M:%S"))
        pkg.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILENAME,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FMT))

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue()
        queue_handler = QueueHandler(log_queue)
        queue_handler.addFilter(ctx_filter)
        pkg.addHandler(queue_handler)

        global _queue_listener, _atexit_registered  # noqa: PLW0603
        listener = QueueListener(log_queue, file_handler)
        listener.start()
        _queue_listener = listener
        if not _atexit_registered:
            atexit.register(_stop_queue_listener)
            _atexit_registered = True

    logger.info("Logging initialized (level=%s)", logging.getLevelName(resolved))


def flush_file_logging() -> None:
    """Stop the background file listener so queued records reach disk."""
    _stop_queue_listener()
