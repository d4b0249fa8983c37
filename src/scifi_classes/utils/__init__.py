# src/scifi_classes/utils/__init__.py

from .pathing import (
    project_root,
    resolve_project_path,
    default_quotes_path,
    tests_data_path,
)

__all__ = [
    "project_root",
    "resolve_project_path",
    "default_quotes_path",
    "tests_data_path",
]
