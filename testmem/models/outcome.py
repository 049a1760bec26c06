"""Per-directory outcomes and the aggregated scan report."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field  # type: ignore
from typing import List, Optional


class OutcomeKind(str, Enum):
    """What happened to a visited directory."""

    SKIPPED = "skipped"
    ERROR = "error"
    MEASURED = "measured"
    FLAGGED = "flagged"


class DirectoryOutcome(BaseModel):
    """Result of processing a single directory."""

    path: str = Field(..., description="Directory relative to the scan root")
    kind: OutcomeKind
    size: Optional[str] = Field(None, description="Size token reported by the profiler")
    size_bytes: Optional[int] = Field(None, description="Parsed size, when a limit is set")
    reason: Optional[str] = Field(None, description="Why the directory was skipped or errored")
    profile_blob: Optional[bytes] = Field(
        None, description="Raw profile contents, only for flagged directories"
    )
    warnings: List[str] = Field(default_factory=list)

    model_config = ConfigDict(ser_json_bytes="base64")

    @classmethod
    def skipped(cls, path: str, reason: str) -> "DirectoryOutcome":
        return cls(path=path, kind=OutcomeKind.SKIPPED, reason=reason)

    @classmethod
    def error(cls, path: str, reason: str) -> "DirectoryOutcome":
        return cls(path=path, kind=OutcomeKind.ERROR, reason=reason)

    @property
    def is_reported(self) -> bool:
        """Skipped directories produce no output line."""
        return self.kind != OutcomeKind.SKIPPED


class ScanReport(BaseModel):
    """All outcomes of one scan."""

    root: str
    limit_bytes: int = 0
    outcomes: List[DirectoryOutcome] = Field(default_factory=list)

    model_config = ConfigDict(ser_json_bytes="base64")

    def add(self, outcome: DirectoryOutcome) -> None:
        self.outcomes.append(outcome)

    def _count(self, kind: OutcomeKind) -> int:
        return sum(1 for o in self.outcomes if o.kind == kind)

    @property
    def measured(self) -> int:
        return self._count(OutcomeKind.MEASURED)

    @property
    def flagged(self) -> int:
        return self._count(OutcomeKind.FLAGGED)

    @property
    def errors(self) -> int:
        return self._count(OutcomeKind.ERROR)

    @property
    def skipped(self) -> int:
        return self._count(OutcomeKind.SKIPPED)

    @property
    def reported(self) -> List[DirectoryOutcome]:
        """Outcomes that produced an output line, in visit order."""
        return [o for o in self.outcomes if o.is_reported]

    @property
    def has_failures(self) -> bool:
        """Check if any directory errored or exceeded the limit."""
        return self.errors > 0 or self.flagged > 0
