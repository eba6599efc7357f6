"""Directory fixtures."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from fsfix.args import DirFixtureArgs
from fsfix.errors import FixtureCreationError
from fsfix.fixture import Fixture, FixtureContainer, PathName
from fsfix.safety import node_name

if TYPE_CHECKING:
    from fsfix.file import FileFixture

logger = logging.getLogger(__name__)


class DirFixture(FixtureContainer):
    """A directory under a parent fixture, holding its own files and children."""

    def __init__(
        self,
        name: PathName,
        args: DirFixtureArgs | None = None,
        *,
        parent: Fixture,
    ) -> None:
        if args is None:
            args = DirFixtureArgs()
        self.name = node_name(name, parent.reporter, "Directory fixture")
        self.parent = parent
        self.reporter = parent.reporter
        self.config = parent.config
        self.permissions: int = (
            args.permissions if args.permissions is not None else self.config.dir_permissions
        )
        self.modified_time: datetime | None = args.modified_time
        self._child_fixtures: list[Fixture] = []
        self._file_fixtures: list[FileFixture] = []
        self._dir: Path | None = None
        self._created = False

    def __repr__(self) -> str:
        return f"DirFixture(name={str(self.name)!r})"

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
        assert self._dir is not None
        return self._dir

    @property
    def relative_path(self) -> Path:
        return self.parent.relative_path / self.name

    def make_dir(self, path: PathName) -> Path:
        """Join *path* onto this fixture's directory (no I/O)."""
        return self.dir / path

    def _label(self) -> str:
        return str(self.name)

    def _create_with_parent(self, parent: Fixture) -> None:
        self._make_dir(parent)
        self._create_contents(self)
        self._apply_modified_time()

    def _make_dir(self, parent: Fixture) -> None:
        self._created = True
        self._dir = parent.dir / self.name
        try:
            # Every segment of a nested name gets the fixture's mode.
            segment = parent.dir
            for part in self.name.parts:
                segment = segment / part
                segment.mkdir(mode=self.permissions, parents=True, exist_ok=True)
        except OSError as exc:
            self.reporter.error(
                FixtureCreationError(f"Failed to create testing directory {self._dir}: {exc}")
            )
            return
        logger.debug("Created directory %s (mode=%o)", self._dir, self.permissions)

    def _apply_modified_time(self) -> None:
        if self.modified_time is None or self._dir is None:
            return
        ts = self.modified_time.timestamp()
        try:
            os.utime(self._dir, (ts, ts))
        except OSError as exc:
            self.reporter.error(
                FixtureCreationError(f"Failed to set modification time for {self._dir}: {exc}")
            )
