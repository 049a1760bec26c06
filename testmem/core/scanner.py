"""Pipeline driver: walk, run, parse and evaluate each test directory."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from ..discovery import is_testable_dir, is_valid_path, walk_directories
from ..models import DirectoryOutcome, OutcomeKind, ScanReport
from .config import ScanConfig
from .evaluator import SizeEvaluator
from .profile_parser import ProfileParser
from .runner import TestRunner

logger = logging.getLogger(__name__)

PROFILE_FILE_NAME = "mem.out"


class MemoryScanner:
    """Measures the memory used by every test suite under a root directory.

    Directories are processed strictly one after another. Each produces a
    DirectoryOutcome, handed to ``on_outcome`` as soon as it is known and
    collected into the returned ScanReport.
    """

    def __init__(
        self,
        config: ScanConfig,
        limit_bytes: int = 0,
        on_output: Callable[[str, str], None] | None = None,
    ) -> None:
        """
        Initialize the scanner.

        Args:
            config: Scan configuration
            limit_bytes: Flag suites above this many bytes; 0 disables flagging
            on_output: Receives raw child process output in debug mode
        """
        self.config = config
        self.runner = TestRunner(config, on_output=on_output)
        self.profile_parser = ProfileParser(config, on_output=on_output)
        self.evaluator = SizeEvaluator(limit_bytes)

    def scan(
        self, on_outcome: Callable[[DirectoryOutcome], None] | None = None
    ) -> ScanReport:
        """Process every directory under the configured root."""
        report = ScanReport(root=self.config.root, limit_bytes=self.evaluator.limit_bytes)
        for outcome in self.iter_outcomes():
            report.add(outcome)
            if on_outcome:
                on_outcome(outcome)
        logger.info(
            "Scan of %s finished: %d measured, %d flagged, %d errors, %d skipped",
            report.root,
            report.measured,
            report.flagged,
            report.errors,
            report.skipped,
        )
        return report

    def iter_outcomes(self) -> Iterator[DirectoryOutcome]:
        """Yield one outcome per visited directory, in walk order."""
        with self._profile_workspace() as workspace:
            for path in walk_directories(self.config.root):
                skip_reason = self._skip_reason(path)
                if skip_reason:
                    logger.debug("Skipping %s: %s", path, skip_reason)
                    yield DirectoryOutcome.skipped(path, skip_reason)
                    continue
                profile_path = self._profile_path(workspace)
                try:
                    outcome = self.measure(path, profile_path)
                finally:
                    self._discard_profile(workspace, profile_path)
                yield outcome

    def measure(self, path: str, profile_path: str) -> DirectoryOutcome:
        """Run, profile and evaluate the suite in one qualifying directory."""
        run = self.runner.run(path, profile_path)
        if not run.succeeded:
            return DirectoryOutcome.error(path, f"test command exited with {run.exit_code}")

        profile = self.profile_parser.parse(path, profile_path)
        if not profile.has_total:
            return DirectoryOutcome.error(path, "no total in profile listing")

        evaluation = self.evaluator.evaluate(profile.total_size, profile_path)
        return DirectoryOutcome(
            path=path,
            kind=OutcomeKind.FLAGGED if evaluation.flagged else OutcomeKind.MEASURED,
            size=profile.total_size,
            size_bytes=evaluation.size_bytes,
            profile_blob=evaluation.profile_blob,
            warnings=evaluation.warnings,
        )

    def _skip_reason(self, path: str) -> str | None:
        if not is_valid_path(path, self.config.excluded_dirs):
            return "hidden or excluded"
        directory = os.path.join(self.config.root, path)
        try:
            if not is_testable_dir(directory, self.config.test_suffix):
                return "no test files"
        except OSError as e:
            return f"unreadable: {e.strerror or e}"
        return None

    @contextmanager
    def _profile_workspace(self) -> Iterator[str | None]:
        if self.config.profile_path:
            yield None
            return
        with tempfile.TemporaryDirectory(prefix="testmem-") as workspace:
            yield workspace

    def _profile_path(self, workspace: str | None) -> str:
        """A fresh profile location per directory unless one is configured."""
        if workspace is None:
            return os.path.abspath(self.config.profile_path)
        return os.path.join(tempfile.mkdtemp(dir=workspace), PROFILE_FILE_NAME)

    def _discard_profile(self, workspace: str | None, profile_path: str) -> None:
        """Remove a per-directory profile once its outcome holds what it needs."""
        if workspace is None:
            return
        shutil.rmtree(os.path.dirname(profile_path), ignore_errors=True)
