"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from explorefs.bridge.client import DeviceBridgeClient
from explorefs.vfs.router import PathRouter


@pytest.fixture
def mock_devices_output() -> str:
    """Sample `adb devices` output with one ready and one offline device."""
    return """List of devices attached
R58M123ABC\tdevice
emulator-5554\toffline

"""


@pytest.fixture
def mock_ls_output() -> str:
    """Sample `ls -1a` output from a device directory."""
    return ".\n..\nDCIM\nDownload\n\nnotes.txt\n"


@pytest.fixture
def client() -> DeviceBridgeClient:
    """Bridge client pointing at a fake adb path."""
    return DeviceBridgeClient("/fake/adb", timeout=5.0)


@pytest.fixture
def router(client: DeviceBridgeClient) -> PathRouter:
    """Router using the default adb:// scheme."""
    return PathRouter(client)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Local tree: src/x.txt (3 bytes) and src/sub/y.txt (5 bytes)."""
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "x.txt").write_bytes(b"abc")
    (src / "sub" / "y.txt").write_bytes(b"hello")
    return src
