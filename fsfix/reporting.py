"""Failure reporting: the seam between fixtures and the running test."""

from __future__ import annotations

import logging
from typing import NoReturn, Protocol

from fsfix.errors import FixtureFailuresError, FsfixError

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Receives fixture failures on behalf of the test being executed."""

    def error(self, exc: FsfixError) -> None:
        """Record a failure without interrupting the caller."""
        ...

    def fatal(self, exc: FsfixError) -> NoReturn:
        """Abort the current test with *exc*."""
        ...


class FailureLog:
    """Default reporter: logs and collects non-fatal failures, raises fatal ones."""

    def __init__(self) -> None:
        self.failures: list[FsfixError] = []

    def error(self, exc: FsfixError) -> None:
        logger.error("%s", exc)
        self.failures.append(exc)

    def fatal(self, exc: FsfixError) -> NoReturn:
        logger.error("Fatal: %s", exc)
        raise exc

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def raise_if_failed(self) -> None:
        """Raise `FixtureFailuresError` if any failure was recorded, then reset."""
        if not self.failures:
            return
        failures = self.failures
        self.failures = []
        raise FixtureFailuresError(failures)
