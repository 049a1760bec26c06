"""Exceptions raised by testmem."""


class TestMemError(Exception):
    """Base class for testmem errors."""

    __test__ = False  # Prevent pytest from collecting this as a test class


class SizeParseError(TestMemError, ValueError):
    """A size literal such as ``10MB`` could not be converted to bytes."""


class ConfigError(TestMemError):
    """Configuration file is missing or invalid."""
