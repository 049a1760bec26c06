"""Render a memory profile with pprof and pull out its total."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..models import ProfileReport
from .config import ScanConfig
from .runner import run_command

logger = logging.getLogger(__name__)

TOTAL_MARKER = "Total"


def extract_total_size(report: str, marker: str = TOTAL_MARKER) -> str | None:
    """
    Find the allocation total in a pprof text report.

    ``go tool pprof -list`` starts its output with a summary line such as
    ``Total: 512kB`` before the per-routine listings. The first line that
    contains ``marker`` is split on whitespace and the token after the one
    holding the marker is returned. Column layout beyond that line is not
    interpreted.

    Args:
        report: Raw text printed by pprof
        marker: Token that introduces the total figure

    Returns:
        The size token (e.g. ``"512kB"``), or None if there is no total
    """
    for line in report.splitlines():
        if marker not in line:
            continue
        tokens = line.split()
        index = next((i for i, token in enumerate(tokens) if marker in token), None)
        if index is None or index + 1 >= len(tokens):
            return None
        return tokens[index + 1]
    return None


class ProfileParser:
    """Invokes pprof's listing mode for one directory's profile."""

    def __init__(
        self,
        config: ScanConfig,
        on_output: Callable[[str, str], None] | None = None,
    ) -> None:
        self.config = config
        self.on_output = on_output

    def parse(self, path: str, profile_path: str) -> ProfileReport:
        """List the profile for ``path`` and extract its total size."""
        command = self.config.profile_command(path, profile_path)
        exit_code, output = run_command(
            command,
            self.config.root,
            merge_stderr=False,
            timeout=self.config.timeout_seconds,
        )
        if self.config.debug and self.on_output:
            self.on_output("go tool pprof", output)

        total = extract_total_size(output)
        if total is None:
            logger.info("No %r marker in pprof output for %s", TOTAL_MARKER, path)
        return ProfileReport(
            path=path,
            command=command,
            output=output,
            exit_code=exit_code,
            total_size=total,
        )
