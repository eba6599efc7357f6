"""Logging context: ContextVar-based log enrichment for fixture trees.

Every log record passing a handler installed by `setup_logging` is enriched
with a ``[prefix]`` tag naming the root fixture being created or cleaned up.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from contextvars import ContextVar

ctx_fixture: ContextVar[str | None] = ContextVar("ctx_fixture", default=None)


class ContextFilter(logging.Filter):
    """Inject the active root fixture prefix into every LogRecord as ``record.ctx``."""

    def filter(self, record: logging.LogRecord) -> bool:
        prefix = ctx_fixture.get(None)
        record.ctx = f"[{prefix}] " if prefix else ""
        return True


@contextlib.contextmanager
def fixture_log_context(prefix: str) -> Iterator[None]:
    """Tag log records emitted inside the block with *prefix*."""
    token = ctx_fixture.set(prefix)
    try:
        yield
    finally:
        ctx_fixture.reset(token)
