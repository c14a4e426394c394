"""Shared fixtures for the rename tool tests."""

import os
from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest


def make_tree(root: Path, entries: Iterable[str]) -> Path:
    """Create entries under root; names ending in "/" are directories."""
    root.mkdir(parents=True, exist_ok=True)
    for entry in entries:
        path = root / entry
        if entry.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"content of {entry}", encoding="utf-8")
    return root


def snapshot(root: Path) -> Dict[str, Optional[bytes]]:
    """Relative path -> file bytes (None for directories)."""
    state: Dict[str, Optional[bytes]] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames:
            state[os.path.relpath(os.path.join(dirpath, name), root)] = None
        for name in filenames:
            full = os.path.join(dirpath, name)
            with open(full, "rb") as f:
                state[os.path.relpath(full, root)] = f.read()
    return state


@pytest.fixture
def tree(tmp_path):
    """Factory building a tree under tmp_path/"root"."""

    def _build(*entries: str) -> Path:
        return make_tree(tmp_path / "root", entries)

    return _build


@pytest.fixture
def deny_listing(monkeypatch):
    """Make os.scandir fail with PermissionError for the given directories."""

    def _deny(*paths: Path):
        denied = {os.path.abspath(p) for p in paths}
        real_scandir = os.scandir

        def fake_scandir(path="."):
            if os.path.abspath(path) in denied:
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", fake_scandir)

    return _deny


@pytest.fixture
def take_snapshot():
    """Expose snapshot() to tests."""
    return snapshot
