"""Tests for testmem.discovery.tree_walker."""

import os

import pytest

from testmem.discovery.tree_walker import walk_directories


def test_pre_order_lexical(tmp_path):
    for name in ["b/d", "a/c", "a/b", ".hidden/x"]:
        (tmp_path / name).mkdir(parents=True)
    (tmp_path / "a" / "file.go").write_text("package a\n")

    assert list(walk_directories(tmp_path)) == [".", ".hidden", ".hidden/x", "a", "a/b", "a/c", "b", "b/d"]


def test_files_are_not_yielded(tmp_path):
    (tmp_path / "main.go").write_text("package main\n")

    assert list(walk_directories(str(tmp_path))) == ["."]


def test_missing_root_yields_nothing(tmp_path, caplog):
    assert list(walk_directories(tmp_path / "missing")) == []
    assert "Cannot traverse" in caplog.text


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlinked_directories_are_not_followed(tmp_path):
    target = tmp_path / "real"
    target.mkdir()
    (target / "inner").mkdir()
    (tmp_path / "link").symlink_to(target, target_is_directory=True)

    assert list(walk_directories(tmp_path)) == [".", "real", "real/inner"]
