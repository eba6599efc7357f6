"""File fixtures: single files with literal or generated content."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from fsfix.args import ContentFunc, FileFixtureArgs
from fsfix.errors import FixtureCreationError, FixtureNotCreatedError
from fsfix.safety import node_name

if TYPE_CHECKING:
    from fsfix.fixture import Fixture, PathName

logger = logging.getLogger(__name__)


class FileFixture:
    """A file written beneath a parent fixture when the tree is created.

    After creation ``content`` holds what was written, including output of
    ``content_func``.
    """

    def __init__(
        self,
        name: PathName,
        args: FileFixtureArgs | None = None,
        *,
        parent: Fixture,
    ) -> None:
        if args is None:
            args = FileFixtureArgs()
        config = parent.config
        self.name = node_name(name, parent.reporter, "File fixture")
        self.parent = parent
        self.reporter = parent.reporter
        self.content: str | None = args.content
        self.content_func: ContentFunc | None = args.content_func
        self.permissions: int = (
            args.permissions if args.permissions is not None else config.file_permissions
        )
        self.dir_permissions: int = (
            args.dir_permissions if args.dir_permissions is not None else config.dir_permissions
        )
        self.modified_time: datetime | None = args.modified_time
        self.do_not_create = args.do_not_create
        self._filepath: Path | None = None
        self.created = False

    def __repr__(self) -> str:
        return f"FileFixture(name={str(self.name)!r}, do_not_create={self.do_not_create})"

    @property
    def filepath(self) -> Path:
        """Absolute path of the file; resolved even when ``do_not_create`` is set."""
        self._ensure_created()
        assert self._filepath is not None
        return self._filepath

    @property
    def relative_path(self) -> Path:
        return self.parent.relative_path / self.name

    def _ensure_created(self) -> None:
        if not self.created:
            msg = f"FileFixture '{self.name}' has not yet been created"
            self.reporter.fatal(FixtureNotCreatedError(msg))

    def _create_with_parent(self, parent: Fixture) -> None:
        self.created = True
        self._filepath = parent.dir / self.name
        if self.do_not_create:
            logger.debug("Skipping %s (do_not_create)", self._filepath)
            return
        self._write()

    def _write(self) -> None:
        path = self.filepath
        try:
            path.parent.mkdir(mode=self.dir_permissions, parents=True, exist_ok=True)
        except OSError as exc:
            self.reporter.error(
                FixtureCreationError(f"Failed to create test file directory {path.parent}: {exc}")
            )

        if self.content_func is not None:
            self.content = self.content_func(self)

        try:
            path.write_text(self.content or "", encoding="utf-8")
            os.chmod(path, self.permissions)
        except OSError as exc:
            self.reporter.error(FixtureCreationError(f"Failed to create test file {path}: {exc}"))
            return
        logger.debug("Wrote %s (mode=%o)", path, self.permissions)

        if self.modified_time is not None:
            ts = self.modified_time.timestamp()
            try:
                os.utime(path, (ts, ts))
            except OSError as exc:
                self.reporter.error(
                    FixtureCreationError(f"Failed to set modification time for {path}: {exc}")
                )


# Resolves the FileFixture reference inside FileFixtureArgs.content_func.
FileFixtureArgs.model_rebuild()
