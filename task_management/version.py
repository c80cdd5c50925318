"""Version management - single source of truth."""

import tomllib
from importlib import metadata
from pathlib import Path

# Root directory of the project
PROJECT_ROOT = Path(__file__).parent.parent
DISTRIBUTION_NAME = "task-management-viewmodels"


def get_version() -> str:
    """
    Get version from pyproject.toml.

    Falls back to the installed distribution metadata when the package runs
    outside a source checkout.

    Returns:
        Version string (e.g., "1.0.0")
    """
    pyproject_path = PROJECT_ROOT / "pyproject.toml"
    if not pyproject_path.exists():
        return metadata.version(DISTRIBUTION_NAME)

    with open(pyproject_path, "rb") as f:
        pyproject_data = tomllib.load(f)

    return pyproject_data["project"]["version"]


__version__ = get_version()
