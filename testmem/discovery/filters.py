"""Decide which directories are worth measuring."""

import os
from typing import Iterable

DEFAULT_EXCLUDED = ("vendor",)


def is_valid_path(path: str, excluded_names: Iterable[str] = DEFAULT_EXCLUDED) -> bool:
    """
    Check if a slash-delimited relative path should be considered at all.

    Hidden directories (any segment starting with ``.``) and vendored code are
    rejected. ``"."`` is a hidden segment too, so the scan root itself never
    qualifies.

    Args:
        path: Path relative to the scan root, using ``/`` separators
        excluded_names: Segment names that disqualify a path

    Returns:
        True if no segment is hidden or excluded
    """
    excluded = set(excluded_names)
    for segment in path.split("/"):
        if segment.startswith("."):
            return False
        if segment in excluded:
            return False
    return True


def is_testable_dir(directory: str, suffix: str = "_test.go") -> bool:
    """
    Check if a directory directly contains test source files.

    Raises:
        OSError: If the directory cannot be listed
    """
    return any(name.endswith(suffix) for name in os.listdir(directory))
