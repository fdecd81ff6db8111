# src/treeyaml/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at <project_root>/src/treeyaml/utils/pathing.py,
# so parents[3] is the project root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory (the one that
    contains src/, tests/ and config/).
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("config/treeyaml.yml")
        resolve_project_path(Path("tests") / "data" / "config.yaml")
    """
    return project_root() / Path(relative)


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under tests/data/.

    Examples:
        tests_data_path("config.yaml")
        tests_data_path("invalid", "tab.yaml")
    """
    return resolve_project_path(Path("tests") / "data" / Path(*parts))
