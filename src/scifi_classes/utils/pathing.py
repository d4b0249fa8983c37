# src/scifi_classes/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

from scifi_classes.config import get_config


# This file lives at <project_root>/src/scifi_classes/utils/pathing.py
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is the directory that contains src/, tests/, config/
    and data/.
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Absolute paths are returned unchanged.
    """
    path = Path(relative)
    if path.is_absolute():
        return path
    return project_root() / path


def default_quotes_path() -> Path:
    """Return the quotes file configured under ``paths.quotes_file``."""
    cfg = get_config()
    return resolve_project_path(cfg.paths.get("quotes_file", "data/quotes.txt"))


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under tests/data/.

    Examples:
        tests_data_path("quotes_mixed.txt")
    """
    return resolve_project_path(Path("tests") / "data" / Path(*parts))


# Keep pytest from collecting the helper when tests import it by name.
tests_data_path.__test__ = False  # type: ignore[attr-defined]
