"""Tests for testmem.discovery.filters."""

import pytest

from testmem.discovery.filters import is_testable_dir, is_valid_path


@pytest.mark.parametrize(
    "path",
    ["a", "a/b", "pkg/cache/lru", "vendored", "my.pkg", "a/b.c"],
)
def test_valid_paths(path):
    assert is_valid_path(path)


@pytest.mark.parametrize(
    "path",
    [".", ".git", "a/.hidden", ".hidden/c", "vendor", "a/vendor", "a/vendor/b", "a/../b"],
)
def test_hidden_and_vendored_paths_are_rejected(path):
    assert not is_valid_path(path)


def test_custom_excluded_names():
    assert not is_valid_path("a/third_party/b", excluded_names=["third_party"])
    assert is_valid_path("a/vendor/b", excluded_names=["third_party"])


def test_testable_dir(tmp_path):
    (tmp_path / "cache.go").write_text("package cache\n")
    assert not is_testable_dir(str(tmp_path))

    (tmp_path / "cache_test.go").write_text("package cache\n")
    assert is_testable_dir(str(tmp_path))


def test_testable_dir_only_looks_at_direct_entries(tmp_path):
    nested = tmp_path / "sub"
    nested.mkdir()
    (nested / "x_test.go").write_text("package sub\n")

    assert not is_testable_dir(str(tmp_path))


def test_testable_dir_custom_suffix(tmp_path):
    (tmp_path / "x_spec.go").write_text("package x\n")

    assert is_testable_dir(str(tmp_path), suffix="_spec.go")
    assert not is_testable_dir(str(tmp_path))


def test_unreadable_dir_raises(tmp_path):
    with pytest.raises(OSError):
        is_testable_dir(str(tmp_path / "missing"))
