"""Pre-order traversal of the directories under a scan root."""

import logging
import os
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger(__name__)


def _log_walk_error(error: OSError) -> None:
    logger.warning("Cannot traverse %s: %s", error.filename, error.strerror or error)


def to_relative(directory: str, root: Union[str, Path]) -> str:
    """Path of ``directory`` relative to ``root`` with ``/`` separators."""
    return Path(os.path.relpath(directory, root)).as_posix()


def walk_directories(root: Union[str, Path]) -> Iterator[str]:
    """
    Yield every directory under ``root``, root first, in pre-order.

    Siblings are visited in lexical order and symbolic links are not
    followed. Nothing is pruned: filtering is left to the caller so each
    directory is judged independently. Directories that cannot be read are
    logged and the walk moves on.

    Yields:
        Paths relative to ``root`` using ``/`` separators (``"."`` for the root)
    """
    for dirpath, dirnames, _ in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        yield to_relative(dirpath, root)
