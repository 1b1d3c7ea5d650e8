"""Version lookup for the ``arbgen --version`` flag."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Any, Final

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - exercised on Python 3.10 only
    import tomli as tomllib

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME: Final = "arbgen"
PYPROJECT_PATH: Final = Path(__file__).resolve().parents[2] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the installed distribution version.

    A source checkout that was never installed has no distribution metadata;
    the ``[project]`` table of ``pyproject.toml`` answers instead.
    """

    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        logger.debug("%s is not installed, reading %s", DISTRIBUTION_NAME, PYPROJECT_PATH)
        return read_pyproject_version(PYPROJECT_PATH)


def read_pyproject_version(path: Path) -> str:
    """Return ``project.version`` from a ``pyproject.toml`` file."""

    try:
        with path.open("rb") as handle:
            data: dict[str, Any] = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as error:
        raise RuntimeError(f"Unable to read project metadata from {path}: {error}") from error

    version = data.get("project", {}).get("version")
    if not isinstance(version, str) or not version:
        raise RuntimeError(f"{path} does not declare a [project] version")
    return version


__all__ = ["get_project_version", "read_pyproject_version"]
