"""Path guards for fixture trees.

`node_name` keeps fixture names beneath their parent.  The deletion guard
`is_removable_temp_dir` is pure string logic so it can be exercised with
synthetic paths; `remove_temp_tree` is the only place that acts on its answer.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from types import ModuleType

from fsfix.errors import FixtureCleanupError, FixtureUsageError
from fsfix.reporting import Reporter

logger = logging.getLogger(__name__)


def filesystem_root(path: str, pathmod: ModuleType = os.path) -> str:
    """Return the root of *path*'s volume: ``/`` on POSIX, ``C:\\`` on Windows."""
    drive, _ = pathmod.splitdrive(path)
    return drive + pathmod.sep


def node_name(name: str | os.PathLike[str], reporter: Reporter, kind: str) -> Path:
    """Return *name* as a path that stays beneath its parent fixture.

    Absolute or drive-anchored names, and names that climb out with ``..``,
    are fatal usage errors.
    """
    path = Path(name)
    if path.anchor or path.is_absolute():
        reporter.fatal(FixtureUsageError(f"{kind} name must be relative: '{path}'"))
    parts = Path(os.path.normpath(path)).parts
    if parts and parts[0] == os.pardir:
        reporter.fatal(FixtureUsageError(f"{kind} name escapes its parent: '{path}'"))
    return path


def is_removable_temp_dir(
    path: str | os.PathLike[str] | None,
    temp_root: str | os.PathLike[str] | None = None,
    *,
    pathmod: ModuleType = os.path,
) -> bool:
    """Report whether *path* is strictly nested under the temp root.

    Refuses empty and relative paths, the filesystem root, the temp root
    itself, and anything whose position relative to the temp root cannot be
    computed or climbs out of it.  *temp_root* defaults to
    ``tempfile.gettempdir()``.
    """
    if path is None:
        return False
    raw = os.fspath(path)
    if not raw:
        return False

    candidate = pathmod.normpath(raw)
    if not pathmod.isabs(candidate):
        return False

    if candidate == filesystem_root(candidate, pathmod):
        return False

    raw_root = os.fspath(temp_root) if temp_root is not None else tempfile.gettempdir()
    root = pathmod.normpath(raw_root)
    if candidate == root:
        return False

    try:
        rel = pathmod.relpath(candidate, root)
    except ValueError:
        # Different drives on Windows.
        return False

    if rel == pathmod.curdir:
        return False
    return rel.split(pathmod.sep)[0] != pathmod.pardir


def remove_temp_tree(
    path: str | os.PathLike[str] | None,
    reporter: Reporter,
    *,
    temp_root: str | os.PathLike[str] | None = None,
) -> bool:
    """Recursively delete *path* if the guard allows it.

    Returns True when the tree was removed.  A guard refusal is a silent
    no-op; an ``rmtree`` failure is recorded on *reporter*, never raised.
    """
    if not is_removable_temp_dir(path, temp_root):
        logger.debug("Refusing to remove %r (not inside temp root)", path)
        return False

    target = Path(os.path.normpath(os.fspath(path)))  # type: ignore[arg-type]
    try:
        shutil.rmtree(target)
    except FileNotFoundError:
        logger.debug("Already removed: %s", target)
        return True
    except OSError as exc:
        reporter.error(FixtureCleanupError(f"Failed to remove temporary files {target}: {exc}"))
        return False
    logger.debug("Removed %s", target)
    return True
