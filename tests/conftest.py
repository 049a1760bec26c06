"""Shared fixtures: a fake Go toolchain and source tree builder."""

import os
import subprocess
from pathlib import Path

import pytest

PROFILE_BYTES = b"\x1f\x8bfake-heap-profile"


class FakeGo:
    """Stands in for subprocess.run, answering go test and go tool pprof."""

    def __init__(self):
        self.calls = []
        self.failing = set()
        self.totals = {}
        self.default_total = "512kB"
        self.profile_bytes = PROFILE_BYTES

    def __call__(self, command, cwd=None, stdout=None, stderr=None, timeout=None, check=False):
        command = list(command)
        self.calls.append(command)
        if command[1] == "test":
            path = command[-1][len("./"):]
            if path in self.failing:
                return subprocess.CompletedProcess(command, 1, stdout=b"--- FAIL: TestThing\nFAIL\n")
            profile = command[command.index("-memprofile") + 1]
            Path(profile).write_bytes(self.profile_bytes)
            return subprocess.CompletedProcess(command, 0, stdout=b"ok\n")

        path = command[4][: -len(".test")]
        total = self.totals.get(path, self.default_total)
        if total is None:
            return subprocess.CompletedProcess(command, 1, stdout=b"")
        listing = f"Total: {total}\nROUTINE ======================== {path}.Alloc\n"
        return subprocess.CompletedProcess(command, 0, stdout=listing.encode())

    @property
    def test_calls(self):
        return [c for c in self.calls if c[1] == "test"]

    @property
    def profile_calls(self):
        return [c for c in self.calls if c[1] == "tool"]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep the developer's TESTMEM_* variables and .env file out of every test."""
    for name in list(os.environ):
        if name.upper().startswith("TESTMEM_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_go(monkeypatch):
    fake = FakeGo()
    monkeypatch.setattr("testmem.core.runner.subprocess.run", fake)
    return fake


@pytest.fixture
def make_tree(tmp_path):
    """Create files (and their parent directories) under tmp_path."""

    def _make(*files):
        for name in files:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("package x\n")
        return tmp_path

    return _make
