"""
testmem - memory usage of Go test suites, directory by directory.

Walks a source tree, runs every directory's tests under the Go memory
profiler and reports the allocation total pprof prints for each one,
optionally flagging suites that exceed a size budget.
"""

from .core.config import ScanConfig
from .core.scanner import MemoryScanner
from .core.sizes import format_size, parse_size
from .models import DirectoryOutcome, OutcomeKind, ScanReport

__version__ = "1.0.0"

__all__ = [
    "MemoryScanner",
    "ScanConfig",
    "DirectoryOutcome",
    "OutcomeKind",
    "ScanReport",
    "format_size",
    "parse_size",
]
