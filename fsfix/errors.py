"""Project-level exception hierarchy."""


class FsfixError(Exception):
    """Base for all fsfix exceptions."""


class FixtureNotCreatedError(FsfixError):
    """A fixture path was read before ``create()`` ran."""


class FixtureUsageError(FsfixError):
    """A fixture was attached or configured incorrectly."""


class FixtureCreationError(FsfixError):
    """A directory or file could not be materialized."""


class FixtureCleanupError(FsfixError):
    """Removing a fixture tree failed."""


class FixtureFailuresError(FsfixError):
    """One or more recorded fixture failures were left unhandled."""

    def __init__(self, failures: list[FsfixError]) -> None:
        self.failures = list(failures)
        lines = "\n".join(f"  - {type(f).__name__}: {f}" for f in self.failures)
        super().__init__(f"{len(self.failures)} fixture failure(s):\n{lines}")
