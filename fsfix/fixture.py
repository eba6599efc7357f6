"""Fixture interface shared by every node of a fixture tree."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from fsfix.args import DirFixtureArgs, FileFixtureArgs, RepoFixtureArgs
from fsfix.errors import FixtureNotCreatedError, FixtureUsageError
from fsfix.file import FileFixture

if TYPE_CHECKING:
    from fsfix.config import FsfixConfig
    from fsfix.dir import DirFixture
    from fsfix.repo import RepoFixture
    from fsfix.reporting import Reporter

PathName = str | os.PathLike[str]


class Fixture(ABC):
    """A node that owns a directory once its tree has been created."""

    reporter: Reporter
    config: FsfixConfig

    @property
    @abstractmethod
    def created(self) -> bool: ...

    @property
    @abstractmethod
    def dir(self) -> Path:
        """Absolute path of this node's directory; fails before creation."""

    @property
    @abstractmethod
    def relative_path(self) -> Path:
        """Path of this node relative to the root fixture's directory."""

    @abstractmethod
    def _create_with_parent(self, parent: Fixture) -> None: ...

    @abstractmethod
    def _label(self) -> str: ...

    def _ensure_created(self) -> None:
        """Abort the running test if this fixture has not been created yet."""
        if not self.created:
            msg = f"{type(self).__name__} '{self._label()}' has not yet been created"
            self.reporter.fatal(FixtureNotCreatedError(msg))


class FixtureContainer(Fixture):
    """A fixture that can hold child directories, repositories and files."""

    @property
    @abstractmethod
    def child_fixtures(self) -> list[Fixture]: ...

    @property
    @abstractmethod
    def file_fixtures(self) -> list[FileFixture]: ...

    def add_dir_fixture(self, name: PathName, args: DirFixtureArgs | None = None) -> DirFixture:
        """Attach a subdirectory fixture and return it."""
        from fsfix.dir import DirFixture

        child = DirFixture(name, args, parent=self)
        self.child_fixtures.append(child)
        return child

    def add_repo_fixture(self, name: PathName, args: RepoFixtureArgs | None = None) -> RepoFixture:
        """Attach a repository fixture (directory with a VCS marker) and return it."""
        from fsfix.repo import RepoFixture

        child = RepoFixture(name, args, parent=self)
        self.child_fixtures.append(child)
        return child

    def add_file_fixture(self, name: PathName, args: FileFixtureArgs | None = None) -> FileFixture:
        """Attach a file fixture and return it."""
        child = FileFixture(name, args, parent=self)
        self.file_fixtures.append(child)
        return child

    def add_file_fixtures(
        self,
        defaults: FileFixtureArgs | None,
        *items: PathName | FileFixtureArgs,
    ) -> list[FileFixture]:
        """Attach several files at once.

        Plain names use *defaults*; a `FileFixtureArgs` item must carry its
        own ``name`` and is used as-is.
        """
        added: list[FileFixture] = []
        for item in items:
            if isinstance(item, FileFixtureArgs):
                if item.name is None:
                    msg = f"Name not set for file fixture being added to '{self._label()}'"
                    self.reporter.fatal(FixtureUsageError(msg))
                added.append(self.add_file_fixture(item.name, item))
            elif isinstance(item, str | os.PathLike):
                added.append(self.add_file_fixture(item, defaults))
            else:
                msg = (
                    f"Invalid type '{type(item).__name__}' passed for file fixture "
                    f"being added to '{self._label()}': {item!r}"
                )
                self.reporter.fatal(FixtureUsageError(msg))
        return added

    def _create_contents(self, owner: Fixture) -> None:
        """Create this node's files, then walk its children, under *owner*'s directory."""
        for file in self.file_fixtures:
            file._create_with_parent(owner)
        for child in self.child_fixtures:
            child._create_with_parent(owner)
