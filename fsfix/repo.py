"""Repository fixtures: a directory plus a version-control marker directory."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from fsfix.args import DirFixtureArgs, RepoFixtureArgs
from fsfix.dir import DirFixture
from fsfix.errors import FixtureCreationError
from fsfix.fixture import Fixture, FixtureContainer, PathName

if TYPE_CHECKING:
    from fsfix.file import FileFixture

logger = logging.getLogger(__name__)


class RepoFixture(FixtureContainer):
    """A directory that looks like a repository checkout.

    Only the marker directory (``.git`` by default) is created; no VCS tool
    is ever run.
    """

    def __init__(
        self,
        name: PathName,
        args: RepoFixtureArgs | None = None,
        *,
        parent: Fixture,
    ) -> None:
        if args is None:
            args = RepoFixtureArgs()
        self.reporter = parent.reporter
        self.config = parent.config
        self.directory = DirFixture(
            name,
            DirFixtureArgs(permissions=args.permissions, modified_time=args.modified_time),
            parent=parent,
        )

    def __repr__(self) -> str:
        return f"RepoFixture(name={str(self.name)!r})"

    @property
    def name(self) -> Path:
        return self.directory.name

    @property
    def parent(self) -> Fixture:
        return self.directory.parent

    @property
    def permissions(self) -> int:
        return self.directory.permissions

    @property
    def modified_time(self) -> datetime | None:
        return self.directory.modified_time

    @property
    def marker(self) -> str:
        return self.config.repo_marker

    @property
    def created(self) -> bool:
        return self.directory.created

    @property
    def child_fixtures(self) -> list[Fixture]:
        return self.directory.child_fixtures

    @property
    def file_fixtures(self) -> list[FileFixture]:
        return self.directory.file_fixtures

    @property
    def dir(self) -> Path:
        self._ensure_created()
        return self.directory.dir

    @property
    def relative_path(self) -> Path:
        return self.directory.relative_path

    @property
    def git_path(self) -> Path:
        """Absolute path of the marker directory."""
        return self.dir / self.marker

    @property
    def relative_git_path(self) -> Path:
        return self.relative_path / self.marker

    def make_dir(self, path: PathName) -> Path:
        """Join *path* onto this fixture's directory (no I/O)."""
        return self.dir / path

    def _label(self) -> str:
        return str(self.name)

    def _create_with_parent(self, parent: Fixture) -> None:
        self.directory._make_dir(parent)
        self._make_marker()
        self._create_contents(self)
        self.directory._apply_modified_time()

    def _make_marker(self) -> None:
        marker_dir = self.directory.dir / self.marker
        try:
            marker_dir.mkdir(mode=self.config.dir_permissions, parents=True, exist_ok=True)
        except OSError as exc:
            self.reporter.error(
                FixtureCreationError(
                    f"Failed to create {self.marker} directory within {self.directory.dir}: {exc}"
                )
            )
            return
        logger.debug("Created repository marker %s", marker_dir)
