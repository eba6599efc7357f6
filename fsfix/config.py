"""Fixture configuration: package defaults, JSON file and ``FSFIX_*`` env overrides."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_DIR_PERMISSIONS = 0o755
DEFAULT_FILE_PERMISSIONS = 0o644
DEFAULT_REPO_MARKER = ".git"

# Environment variable -> config key.
_ENV_KEYS: dict[str, str] = {
    "FSFIX_TEMP_DIR": "temp_dir",
    "FSFIX_KEEP": "keep_temp_dirs",
    "FSFIX_LOG_LEVEL": "log_level",
}


class FsfixConfig(BaseModel):
    """Defaults applied to every fixture tree built with this config."""

    dir_permissions: int = Field(default=DEFAULT_DIR_PERMISSIONS, ge=0, le=0o7777)
    file_permissions: int = Field(default=DEFAULT_FILE_PERMISSIONS, ge=0, le=0o7777)
    repo_marker: str = Field(default=DEFAULT_REPO_MARKER, min_length=1)
    temp_dir: Path | None = None
    keep_temp_dirs: bool = False
    log_level: str = "INFO"


def _env_overrides(environ: Mapping[str, str]) -> dict[str, object]:
    overrides: dict[str, object] = {}
    for env_key, cfg_key in _ENV_KEYS.items():
        raw = environ.get(env_key, "").strip()
        if raw:
            overrides[cfg_key] = raw
    return overrides


def load_config(
    path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> FsfixConfig:
    """Build an `FsfixConfig` from defaults, an optional JSON file, then env vars.

    A missing *path* is ignored; a file that exists but cannot be parsed is
    logged and ignored.  Invalid values raise ``pydantic.ValidationError``.
    """
    data: dict[str, object] = {}

    if path is not None:
        config_path = Path(path).expanduser()
        if config_path.is_file():
            try:
                loaded = json.loads(config_path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                logger.warning("Failed to parse fsfix config: %s", config_path)
            else:
                if isinstance(loaded, dict):
                    data = loaded
                else:
                    logger.warning("Ignoring non-object fsfix config: %s", config_path)

    env = _env_overrides(os.environ if environ is None else environ)
    return FsfixConfig.model_validate({**data, **env})
