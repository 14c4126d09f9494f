"""Shared path utilities for configuration and log locations.

This module centralizes how the application discovers locations for
config and log files.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml``
- Logs: repository-root ``<repo_root>/logs`` unless overridden by
  ``SIDETAG_LOG_DIR``.
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


_ENV_LOG_DIR: Final[str] = "SIDETAG_LOG_DIR"


def resolve_overridable_path(
    *,
    env: Mapping[str, str] | None,
    env_var: str,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path from an environment override, falling back to ``default_factory``."""

    mapping = env if env is not None else os.environ
    candidate = (mapping.get(env_var) or "").strip()
    if candidate:
        return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path() -> Path:
    """Get the default path to the TOML config file.

    Portable layout: ``<repo_root>/config/config.toml``.
    """
    repo_root = _detect_repo_root()
    return (repo_root / "config" / "config.toml").resolve()


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    return resolve_overridable_path(
        env=env,
        env_var=_ENV_LOG_DIR,
        default_factory=lambda: _detect_repo_root() / "logs",
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return (default_log_dir(env) / "sidetag.log").resolve()


__all__ = [
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
