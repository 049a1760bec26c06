"""Tests for testmem.core.sizes."""

import pytest

from testmem.core.errors import SizeParseError
from testmem.core.sizes import GIGABYTE, KILOBYTE, MEGABYTE, TERABYTE, format_size, parse_size


@pytest.mark.parametrize(
    "text,expected",
    [
        ("10MB", 10485760),
        ("1KB", 1024),
        ("2.5GB", 2684354560),
        ("1TB", 1099511627776),
        ("512kB", 512 * 1024),
        ("64mb", 64 * 1024 * 1024),
        ("0.5KB", 512),
        ("1.0001KB", 1024),
    ],
)
def test_parse_size(text, expected):
    assert parse_size(text) == expected


def test_short_strings_are_zero():
    # Lenient edge behaviour kept on purpose: no unit check below three chars.
    assert parse_size("") == 0
    assert parse_size("xx") == 0
    assert parse_size("MB") == 0


def test_unknown_unit_is_named():
    with pytest.raises(SizeParseError, match="incorrect data unit xy"):
        parse_size("5XY")


def test_bare_bytes_unit_is_rejected():
    # pprof reports tiny totals as e.g. "512B"; the last two chars are "2b".
    with pytest.raises(SizeParseError, match="2b"):
        parse_size("512B")


@pytest.mark.parametrize("text", ["abcMB", "1.2.3GB", " 1MB", "1_0MB", "nanMB", "infGB"])
def test_bad_magnitude(text):
    with pytest.raises(SizeParseError):
        parse_size(text)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_size("xxKB")


@pytest.mark.parametrize(
    "num_bytes,expected",
    [
        (512, "0.50KB"),
        (KILOBYTE, "1.00KB"),
        (10 * MEGABYTE, "10.00MB"),
        (int(2.5 * GIGABYTE), "2.50GB"),
        (3 * TERABYTE, "3.00TB"),
    ],
)
def test_format_size(num_bytes, expected):
    assert format_size(num_bytes) == expected


@pytest.mark.parametrize("unit", [KILOBYTE, MEGABYTE, GIGABYTE, TERABYTE])
@pytest.mark.parametrize("multiple", [1, 7, 100])
def test_format_then_parse_recovers_integral_multiples(unit, multiple):
    assert parse_size(format_size(multiple * unit)) == multiple * unit
