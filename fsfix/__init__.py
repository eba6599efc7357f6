"""Temporary directory-tree fixtures for tests: directories, fake repositories and files."""

from fsfix.args import ContentFunc as ContentFunc
from fsfix.args import DirFixtureArgs as DirFixtureArgs
from fsfix.args import FileFixtureArgs as FileFixtureArgs
from fsfix.args import RepoFixtureArgs as RepoFixtureArgs
from fsfix.config import FsfixConfig as FsfixConfig
from fsfix.config import load_config as load_config
from fsfix.dir import DirFixture as DirFixture
from fsfix.errors import FixtureCleanupError as FixtureCleanupError
from fsfix.errors import FixtureCreationError as FixtureCreationError
from fsfix.errors import FixtureFailuresError as FixtureFailuresError
from fsfix.errors import FixtureNotCreatedError as FixtureNotCreatedError
from fsfix.errors import FixtureUsageError as FixtureUsageError
from fsfix.errors import FsfixError as FsfixError
from fsfix.file import FileFixture as FileFixture
from fsfix.fixture import Fixture as Fixture
from fsfix.repo import RepoFixture as RepoFixture
from fsfix.reporting import FailureLog as FailureLog
from fsfix.reporting import Reporter as Reporter
from fsfix.root import RootFixture as RootFixture
from fsfix.safety import is_removable_temp_dir as is_removable_temp_dir

__all__ = [
    "ContentFunc",
    "DirFixture",
    "DirFixtureArgs",
    "FailureLog",
    "FileFixture",
    "FileFixtureArgs",
    "Fixture",
    "FixtureCleanupError",
    "FixtureCreationError",
    "FixtureFailuresError",
    "FixtureNotCreatedError",
    "FixtureUsageError",
    "FsfixConfig",
    "FsfixError",
    "RepoFixture",
    "Reporter",
    "RootFixture",
    "is_removable_temp_dir",
    "load_config",
]
