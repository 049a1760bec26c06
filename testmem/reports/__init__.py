"""Reporting for testmem."""

from .console import ConsoleReporter, format_line

__all__ = ["ConsoleReporter", "format_line"]
