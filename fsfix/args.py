"""Argument models for attaching fixtures to a tree.

Unset (``None``) permissions fall back to the tree's `FsfixConfig` when the
fixture is attached.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from fsfix.file import FileFixture

# Receives the FileFixture being written; its ``filepath`` is already resolved.
ContentFunc = Callable[["FileFixture"], str]


class DirFixtureArgs(BaseModel):
    """Options for a directory fixture."""

    model_config = ConfigDict(frozen=True)

    permissions: int | None = Field(default=None, ge=0, le=0o7777)
    modified_time: datetime | None = None


class RepoFixtureArgs(DirFixtureArgs):
    """Options for a repository fixture (a directory with a VCS marker)."""


class FileFixtureArgs(BaseModel):
    """Options for a file fixture.

    ``content`` and ``content_func`` are mutually exclusive.  With neither set
    the file is written empty.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: Path | None = None
    content: str | None = None
    content_func: ContentFunc | None = None
    permissions: int | None = Field(default=None, ge=0, le=0o7777)
    dir_permissions: int | None = Field(default=None, ge=0, le=0o7777)
    modified_time: datetime | None = None
    do_not_create: bool = False

    @model_validator(mode="after")
    def _single_content_source(self) -> FileFixtureArgs:
        if self.content is not None and self.content_func is not None:
            msg = "content and content_func are mutually exclusive"
            raise ValueError(msg)
        return self
