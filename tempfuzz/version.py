"""
Version management for tempfuzz.

The version is read from pyproject.toml, which serves as the single source
of truth. Installed (non-editable) copies fall back to the distribution
metadata.
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from pathlib import Path
from typing import Dict

import tomli

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"

_FALLBACK_VERSION = "0.0.0"


def get_version_from_pyproject() -> str:
    """
    Read the version string from pyproject.toml.

    Returns:
        str: Version string in the format "x.y.z"
    """
    try:
        with open(PYPROJECT_PATH, "rb") as f:
            pyproject_data = tomli.load(f)
        return pyproject_data["project"]["version"]
    except (FileNotFoundError, KeyError, tomli.TOMLDecodeError):
        try:
            return distribution_version("tempfuzz")
        except PackageNotFoundError:
            return _FALLBACK_VERSION


# The package version, loaded from pyproject.toml
__version__ = get_version_from_pyproject()


def get_version() -> str:
    """Get the current version of the tempfuzz package."""
    return __version__


def get_version_parts() -> Dict[str, int]:
    """
    Get the version parts as a dictionary.

    Returns:
        Dict with major, minor and patch values
    """
    parts = __version__.split(".")
    return {
        "major": int(parts[0]) if len(parts) > 0 else 0,
        "minor": int(parts[1]) if len(parts) > 1 else 0,
        "patch": int(parts[2]) if len(parts) > 2 else 0,
    }
