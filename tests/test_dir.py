"""Tests for DirFixture and the shared builder API."""

from __future__ import annotations

import stat
from datetime import UTC, datetime
from pathlib import Path

import pytest

from fsfix.args import DirFixtureArgs, FileFixtureArgs
from fsfix.config import FsfixConfig
from fsfix.dir import DirFixture
from fsfix.errors import FixtureNotCreatedError, FixtureUsageError
from fsfix.file import FileFixture
from fsfix.root import RootFixture

# -- builder phase --


def test_add_dir_fixture_sets_parent_and_defaults(config: FsfixConfig) -> None:
    root = RootFixture("t", config=config)
    df = root.add_dir_fixture("internal")

    assert isinstance(df, DirFixture)
    assert df.parent is root
    assert df.name == Path("internal")
    assert df.permissions == 0o755
    assert df.modified_time is None
    assert root.child_fixtures == [df]
    assert df.created is False


def test_permissions_default_from_config(temp_root: Path) -> None:
    root = RootFixture("t", config=FsfixConfig(dir_permissions=0o700))
    assert root.add_dir_fixture("a").permissions == 0o700
    assert root.add_dir_fixture("b", DirFixtureArgs(permissions=0o750)).permissions == 0o750


def test_builder_does_no_io(config: FsfixConfig, temp_root: Path) -> None:
    root = RootFixture("t", config=config)
    root.add_dir_fixture("a").add_dir_fixture("b").add_file_fixture("c.txt")
    root.add_repo_fixture("r")

    assert list(temp_root.iterdir()) == []


def test_relative_path_before_create(config: FsfixConfig) -> None:
    root = RootFixture("t", config=config)
    internal = root.add_dir_fixture("internal")
    widgets = internal.add_dir_fixture("widgets")

    assert widgets.relative_path == Path("internal/widgets")


def test_dir_before_create_is_fatal(config: FsfixConfig) -> None:
    root = RootFixture("t", config=config)
    df = root.add_dir_fixture("internal")
    with pytest.raises(FixtureNotCreatedError, match="DirFixture .internal. has not yet"):
        _ = df.dir


def test_make_dir_before_create_is_fatal(config: FsfixConfig) -> None:
    df = RootFixture("t", config=config).add_dir_fixture("internal")
    with pytest.raises(FixtureNotCreatedError):
        df.make_dir("x")


# -- add_file_fixtures --


def test_add_file_fixtures_with_names_and_args(config: FsfixConfig) -> None:
    root = RootFixture("bulk", config=config)
    df = root.add_dir_fixture("docs")
    defaults = FileFixtureArgs(content="default")

    added = df.add_file_fixtures(
        defaults,
        "a.txt",
        Path("nested/b.txt"),
        FileFixtureArgs(name="c.txt", content="custom"),
    )
    root.create()

    assert [f.name for f in added] == [Path("a.txt"), Path("nested/b.txt"), Path("c.txt")]
    assert df.file_fixtures == added
    assert (df.dir / "a.txt").read_text() == "default"
    assert (df.dir / "nested" / "b.txt").read_text() == "default"
    assert (df.dir / "c.txt").read_text() == "custom"


def test_add_file_fixtures_without_defaults(config: FsfixConfig) -> None:
    root = RootFixture("bulk", config=config)
    added = root.add_file_fixtures(None, "empty.txt")
    root.create()

    assert added[0].filepath.read_text() == ""


def test_add_file_fixtures_requires_name(config: FsfixConfig) -> None:
    df = RootFixture("bulk", config=config).add_dir_fixture("docs")
    with pytest.raises(FixtureUsageError, match="Name not set"):
        df.add_file_fixtures(None, FileFixtureArgs(content="x"))


def test_add_file_fixtures_rejects_other_types(config: FsfixConfig) -> None:
    df = RootFixture("bulk", config=config).add_dir_fixture("docs")
    with pytest.raises(FixtureUsageError, match="Invalid type 'int'"):
        df.add_file_fixtures(None, 42)  # type: ignore[arg-type]


def test_absolute_name_is_fatal(config: FsfixConfig, tmp_path: Path) -> None:
    root = RootFixture("names", config=config)
    with pytest.raises(FixtureUsageError, match="must be relative"):
        root.add_dir_fixture(tmp_path / "outside")
    assert root.child_fixtures == []


def test_name_climbing_out_is_fatal(config: FsfixConfig) -> None:
    df = RootFixture("names", config=config).add_dir_fixture("docs")
    with pytest.raises(FixtureUsageError, match="escapes its parent"):
        df.add_dir_fixture("../../elsewhere")


def test_name_with_inner_parent_segment_stays_inside(config: FsfixConfig) -> None:
    root = RootFixture("names", config=config)
    df = root.add_dir_fixture("a/../b")
    root.create()

    assert df.dir.resolve() == (root.dir / "b").resolve()
    assert df.dir.is_dir()


# -- creation --


def test_create_nested_directories(config: FsfixConfig) -> None:
    root = RootFixture("nest", config=config)
    internal = root.add_dir_fixture("internal")
    widgets = internal.add_dir_fixture("widgets")
    deep = root.add_dir_fixture("a/b/c")
    root.create()

    assert internal.dir == root.dir / "internal"
    assert widgets.dir == internal.dir / "widgets"
    assert deep.dir == root.dir / "a" / "b" / "c"
    for df in (internal, widgets, deep):
        assert df.created is True
        assert df.dir.is_dir()


def test_sibling_paths_are_distinct(config: FsfixConfig) -> None:
    root = RootFixture("sib", config=config)
    a = root.add_dir_fixture("a")
    b = root.add_dir_fixture("b")
    root.create()

    assert a.dir != b.dir
    assert a.dir.parent == b.dir.parent == root.dir


def test_paths_independent_of_attach_order(config: FsfixConfig) -> None:
    def build(order: list[str]) -> RootFixture:
        root = RootFixture("order", config=config)
        for name in order:
            root.add_dir_fixture(name).add_file_fixture(f"{name}.txt")
        root.create()
        return root

    forward = build(["a", "b", "c"])
    backward = build(["c", "b", "a"])

    def rel_paths(root: RootFixture) -> dict[Path, Path]:
        result: dict[Path, Path] = {}
        for child in root.child_fixtures:
            assert isinstance(child, DirFixture)
            result[child.relative_path] = child.dir.relative_to(root.dir)
            for ff in child.file_fixtures:
                result[ff.relative_path] = ff.filepath.relative_to(root.dir)
        return result

    assert rel_paths(forward) == rel_paths(backward)
    assert [c.relative_path for c in backward.child_fixtures] == [Path("c"), Path("b"), Path("a")]


def test_make_dir_joins_without_io(config: FsfixConfig) -> None:
    root = RootFixture("mk", config=config)
    df = root.add_dir_fixture("internal")
    root.create()

    target = df.make_dir("later/sub")

    assert target == df.dir / "later" / "sub"
    assert not target.exists()


def test_dir_permissions_applied(config: FsfixConfig) -> None:
    root = RootFixture("perm", config=config)
    df = root.add_dir_fixture("private", DirFixtureArgs(permissions=0o700))
    root.create()

    assert stat.S_IMODE(df.dir.stat().st_mode) == 0o700


def test_dir_permissions_applied_to_every_segment(config: FsfixConfig) -> None:
    root = RootFixture("perm", config=config)
    df = root.add_dir_fixture("outer/inner", DirFixtureArgs(permissions=0o700))
    root.create()

    assert stat.S_IMODE((root.dir / "outer").stat().st_mode) == 0o700
    assert stat.S_IMODE(df.dir.stat().st_mode) == 0o700


def test_dir_modified_time_applied_after_contents(config: FsfixConfig) -> None:
    when = datetime(2020, 1, 2, 3, 4, 5, tzinfo=UTC)
    root = RootFixture("mtime", config=config)
    df = root.add_dir_fixture("old", DirFixtureArgs(modified_time=when))
    df.add_file_fixture("new.txt", FileFixtureArgs(content="x"))
    df.add_dir_fixture("child")
    root.create()

    assert df.dir.stat().st_mtime == when.timestamp()


def test_files_created_before_children(config: FsfixConfig) -> None:
    seen: list[str] = []

    def record(ff: FileFixture) -> str:
        seen.append(f"file:{ff.relative_path}")
        return ""

    root = RootFixture("order", config=config)
    df = root.add_dir_fixture("top")
    df.add_dir_fixture("child").add_file_fixture("inner.txt", FileFixtureArgs(content_func=record))
    df.add_file_fixture("outer.txt", FileFixtureArgs(content_func=record))
    root.create()

    assert seen == ["file:top/outer.txt", "file:top/child/inner.txt"]
