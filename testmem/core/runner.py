"""Run a directory's test suite with memory profiling enabled."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence

from ..models import TestRunResult
from .config import ScanConfig

logger = logging.getLogger(__name__)

# Exit status reported when the command could not be started or timed out.
EXIT_NOT_FOUND = 127
EXIT_TIMEOUT = 124


def run_command(
    command: Sequence[str],
    cwd: str,
    *,
    merge_stderr: bool = True,
    timeout: float | None = None,
) -> tuple[int, str]:
    """Run ``command`` and return its exit status and decoded output.

    Failures to start the process and timeouts are folded into the result
    instead of raised, so a single directory cannot abort the scan.
    """
    logger.debug("Running %s in %s", " ".join(command), cwd)
    try:
        process = subprocess.run(
            list(command),
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.DEVNULL,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        logger.warning("Cannot run %s: %s", command[0], e)
        return EXIT_NOT_FOUND, str(e)
    except subprocess.TimeoutExpired as e:
        logger.warning("%s timed out after %ss", " ".join(command), timeout)
        output = e.output.decode("utf-8", errors="replace") if e.output else ""
        return EXIT_TIMEOUT, output
    return process.returncode, process.stdout.decode("utf-8", errors="replace")


class TestRunner:
    """Executes ``go test`` for one directory at a time."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    def __init__(
        self,
        config: ScanConfig,
        on_output: Callable[[str, str], None] | None = None,
    ) -> None:
        """
        Initialize the runner.

        Args:
            config: Scan configuration (toolchain, count, race, timeout)
            on_output: Called with a label and the raw output of every run
                when ``config.debug`` is set
        """
        self.config = config
        self.on_output = on_output

    def run(self, path: str, profile_path: str) -> TestRunResult:
        """Run the suite in ``path``, writing its memory profile to ``profile_path``."""
        command = self.config.test_command(path, profile_path)
        exit_code, output = run_command(
            command, self.config.root, timeout=self.config.timeout_seconds
        )
        if self.config.debug and self.on_output:
            self.on_output("go test", output)

        result = TestRunResult(path=path, command=command, output=output, exit_code=exit_code)
        if not result.succeeded:
            logger.info("Tests failed in %s (exit code %d)", path, exit_code)
        return result
