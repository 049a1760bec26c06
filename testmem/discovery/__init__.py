"""Discovery layer for testmem."""

from .filters import is_testable_dir, is_valid_path
from .tree_walker import walk_directories

__all__ = [
    "is_testable_dir",
    "is_valid_path",
    "walk_directories",
]
