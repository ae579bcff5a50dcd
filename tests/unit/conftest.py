"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific setup.
"""

from pathlib import Path

import pytest

from tests.conftest import (
    FakeResponse,
    FakeShell,
    mac_host,
    minimal_config_dict,
    run_cmd,
    write_config,
)

__all__ = [
    "FakeResponse",
    "FakeShell",
    "mac_host",
    "minimal_config_dict",
    "run_cmd",
    "write_config",
]


@pytest.fixture(autouse=True)
def _isolated(mrsetup_home: Path) -> Path:
    """Every unit test runs against a temporary HOME and MRSETUP_HOME."""
    return mrsetup_home


@pytest.fixture
def installed_binary(user_home: Path) -> Path:
    """A fake model-runner binary at the default install path."""
    bin_path = user_home / ".local" / "bin" / "model-runner"
    bin_path.parent.mkdir(parents=True)
    bin_path.write_bytes(b"#!/bin/sh\n")
    bin_path.chmod(0o755)
    return bin_path


@pytest.fixture
def plist_path(user_home: Path) -> Path:
    return user_home / "Library" / "LaunchAgents" / "com.test.model-runner.plist"


@pytest.fixture
def service_log(user_home: Path) -> Path:
    return user_home / "Library" / "Logs" / "model-runner.log"
