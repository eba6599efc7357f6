"""pytest integration: ``root_fixture`` factory with guaranteed cleanup.

Registered through the ``pytest11`` entry point, so installing fsfix is enough::

    def test_project(root_fixture):
        root = root_fixture("my-test")
        repo = root.add_repo_fixture("proj")
        root.create()
        assert repo.git_path.is_dir()
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from fsfix.config import FsfixConfig, load_config
from fsfix.logging_config import setup_logging
from fsfix.reporting import FailureLog
from fsfix.root import RootFixture

RootFixtureFactory = Callable[[str], RootFixture]


class PytestReporter(FailureLog):
    """Collects fixture failures during a test and fails it at teardown."""

    def check(self) -> None:
        if not self.failures:
            return
        lines = "\n".join(f"  {type(f).__name__}: {f}" for f in self.failures)
        count = len(self.failures)
        self.failures = []
        pytest.fail(f"{count} fixture failure(s):\n{lines}", pytrace=False)


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("fsfix", "temporary directory-tree fixtures")
    group.addoption(
        "--fsfix-keep",
        action="store_true",
        default=False,
        help="Keep fixture temp directories instead of removing them after each test.",
    )
    group.addoption(
        "--fsfix-log-dir",
        default=None,
        help="Write fsfix debug logs to this directory.",
    )


def pytest_configure(config: pytest.Config) -> None:
    log_dir = config.getoption("fsfix_log_dir", default=None)
    if log_dir:
        setup_logging(level=load_config().log_level, log_dir=Path(log_dir))


@pytest.fixture
def fsfix_config(request: pytest.FixtureRequest) -> FsfixConfig:
    """Config for fixture trees in this test: env/JSON settings plus command-line flags."""
    config = load_config()
    if request.config.getoption("fsfix_keep", default=False):
        config = config.model_copy(update={"keep_temp_dirs": True})
    return config


@pytest.fixture
def root_fixture(fsfix_config: FsfixConfig) -> Iterator[RootFixtureFactory]:
    """Factory for `RootFixture` trees that are cleaned up when the test ends."""
    reporter = PytestReporter()
    roots: list[RootFixture] = []

    def _make(dir_prefix: str) -> RootFixture:
        root = RootFixture(dir_prefix, reporter=reporter, config=fsfix_config)
        roots.append(root)
        return root

    yield _make

    for root in roots:
        if root.created:
            root.cleanup()
    reporter.check()
