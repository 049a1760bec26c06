"""Core pipeline for testmem."""

from .config import ScanConfig
from .errors import ConfigError, SizeParseError, TestMemError
from .scanner import MemoryScanner
from .sizes import format_size, parse_size

__all__ = [
    "ScanConfig",
    "ConfigError",
    "SizeParseError",
    "TestMemError",
    "MemoryScanner",
    "format_size",
    "parse_size",
]
