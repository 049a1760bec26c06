"""Compare a directory's memory usage against the configured budget."""

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field  # type: ignore

from .errors import SizeParseError
from .sizes import parse_size

logger = logging.getLogger(__name__)


class Evaluation(BaseModel):
    """Outcome of checking one size against the limit."""

    size_bytes: Optional[int] = None
    exceeded: bool = False
    profile_blob: Optional[bytes] = None
    warnings: List[str] = Field(default_factory=list)

    @property
    def flagged(self) -> bool:
        """Over the limit and the profile could be read."""
        return self.exceeded and self.profile_blob is not None


class SizeEvaluator:
    """Applies a byte limit; a limit of 0 or less disables every check."""

    def __init__(self, limit_bytes: int = 0):
        self.limit_bytes = limit_bytes

    @property
    def enabled(self) -> bool:
        return self.limit_bytes > 0

    def evaluate(self, size_text: str, profile_path: str) -> Evaluation:
        """
        Check ``size_text`` against the limit.

        When the limit is exceeded the raw profile is read from
        ``profile_path`` so it can be dumped for inspection. Parse and read
        failures become warnings on the evaluation, never exceptions.
        """
        if not self.enabled:
            return Evaluation()

        try:
            size_bytes = parse_size(size_text)
        except SizeParseError as e:
            logger.info("Unparseable size %r: %s", size_text, e)
            return Evaluation(warnings=[f"Could not parse unit of size: {e}"])

        if size_bytes <= self.limit_bytes:
            return Evaluation(size_bytes=size_bytes)

        logger.info("%s exceeds limit of %d bytes", size_text, self.limit_bytes)
        try:
            blob = Path(profile_path).read_bytes()
        except OSError as e:
            logger.warning("Cannot read profile %s: %s", profile_path, e)
            return Evaluation(
                size_bytes=size_bytes,
                exceeded=True,
                warnings=[f"Could not read file {Path(profile_path).name}"],
            )
        return Evaluation(size_bytes=size_bytes, exceeded=True, profile_blob=blob)
