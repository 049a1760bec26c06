"""Data models for testmem."""

from .outcome import DirectoryOutcome, OutcomeKind, ScanReport
from .run import ProfileReport, TestRunResult

__all__ = [
    "DirectoryOutcome",
    "OutcomeKind",
    "ScanReport",
    "ProfileReport",
    "TestRunResult",
]
