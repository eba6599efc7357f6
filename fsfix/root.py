"""Root fixtures: own a fresh temp directory and drive creation and cleanup."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING

from fsfix.config import FsfixConfig, load_config
from fsfix.errors import FixtureCleanupError, FixtureCreationError, FixtureUsageError
from fsfix.fixture import Fixture, FixtureContainer
from fsfix.log_context import fixture_log_context
from fsfix.reporting import FailureLog, Reporter
from fsfix.safety import remove_temp_tree

if TYPE_CHECKING:
    from fsfix.file import FileFixture

logger = logging.getLogger(__name__)


class RootFixture(FixtureContainer):
    """Top of a fixture tree.

    Attach children, call `create` once, and read paths afterwards.  Used as
    a context manager, cleanup runs on exit whether or not the block raised,
    and failures recorded on the default `FailureLog` are raised on a clean
    exit::

        with RootFixture("my-test") as root:
            repo = root.add_repo_fixture("proj")
            repo.add_file_fixture("main.txt", FileFixtureArgs(content="hi"))
            root.create()
            ...
    """

    def __init__(
        self,
        dir_prefix: str,
        *,
        reporter: Reporter | None = None,
        config: FsfixConfig | None = None,
    ) -> None:
        self.dir_prefix = dir_prefix
        self.reporter = reporter if reporter is not None else FailureLog()
        self.config = config if config is not None else load_config()
        self._child_fixtures: list[Fixture] = []
        self._file_fixtures: list[FileFixture] = []
        self._temp_dir: Path | None = None
        self._created = False
        self._cleaned = False

    def __repr__(self) -> str:
        return f"RootFixture(dir_prefix={self.dir_prefix!r}, temp_dir={self._temp_dir})"

    def __enter__(self) -> RootFixture:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._created:
            self._cleanup()
        if exc_type is None and isinstance(self.reporter, FailureLog):
            self.reporter.raise_if_failed()

    @property
    def created(self) -> bool:
        return self._created

    @property
    def child_fixtures(self) -> list[Fixture]:
        return self._child_fixtures

    @property
    def file_fixtures(self) -> list[FileFixture]:
        return self._file_fixtures

    @property
    def dir(self) -> Path:
        self._ensure_created()
        assert self._temp_dir is not None
        return self._temp_dir

    @property
    def temp_dir(self) -> Path:
        """Alias for `dir`."""
        return self.dir

    @property
    def relative_path(self) -> Path:
        return Path(".")

    def _label(self) -> str:
        return self.dir_prefix

    def _temp_base(self) -> Path | None:
        """Configured base for temp directories, made absolute against the cwd."""
        if self.config.temp_dir is None:
            return None
        return self.config.temp_dir.expanduser().absolute()

    def _create_with_parent(self, parent: Fixture) -> None:
        msg = "RootFixture is the root of a fixture tree and cannot have a parent"
        raise FixtureUsageError(msg)

    def create(self) -> None:
        """Create the temp directory, then every file and child fixture beneath it."""
        with fixture_log_context(self.dir_prefix):
            pattern = f"{self.dir_prefix}-*"
            base = self._temp_base()
            try:
                if base is not None:
                    base.mkdir(parents=True, exist_ok=True)
                temp_dir = tempfile.mkdtemp(prefix=f"{self.dir_prefix}-", dir=base)
            except OSError as exc:
                self.reporter.error(
                    FixtureCreationError(
                        f"Failed to create temp directory using '{pattern}': {exc}"
                    )
                )
                return

            self._temp_dir = Path(temp_dir)
            self._created = True
            self._cleaned = False
            logger.debug("Created temp directory %s", self._temp_dir)
            self._create_contents(self)
            logger.info(
                "Fixture tree created at %s (%d file(s), %d child fixture(s))",
                self._temp_dir,
                len(self._file_fixtures),
                len(self._child_fixtures),
            )

    def cleanup(self) -> None:
        """Remove the temp directory created by `create`.

        Runs at most once per `create`.  Failures are recorded on the
        reporter, never raised.
        """
        self._ensure_created()
        self._cleanup()

    def _cleanup(self) -> None:
        if self._cleaned or self._temp_dir is None:
            return
        self._cleaned = True
        with fixture_log_context(self.dir_prefix):
            if self.config.keep_temp_dirs:
                logger.info("Keeping temp directory %s (keep_temp_dirs)", self._temp_dir)
                return
            try:
                shutil.rmtree(self._temp_dir)
            except FileNotFoundError:
                logger.debug("Temp directory already gone: %s", self._temp_dir)
            except OSError as exc:
                self.reporter.error(
                    FixtureCleanupError(
                        f"Failed to remove temp directory '{self._temp_dir}': {exc}"
                    )
                )
            else:
                logger.debug("Removed temp directory %s", self._temp_dir)

    def remove_files(self) -> bool:
        """Remove the temp directory only if it sits strictly inside the temp root.

        Returns True when the directory was removed.  A path that fails the
        safety checks is left alone without error.
        """
        self._ensure_created()
        with fixture_log_context(self.dir_prefix):
            removed = remove_temp_tree(
                self._temp_dir,
                self.reporter,
                temp_root=self._temp_base(),
            )
        if removed:
            self._cleaned = True
        return removed
