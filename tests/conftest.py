"""Shared pytest configuration and fixtures for all tests."""

import json
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from mrsetup.utils import logger as mrsetup_logger

DOMAIN_MARKERS = (
    "config",
    "prereq",
    "deps",
    "binary",
    "service",
    "verify",
    "colima",
    "shell",
    "logs",
    "setup",
    "uninstall",
    "cli",
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with every external command faked")
    config.addinivalue_line("markers", "integration: tests that talk to the real launchd (macOS only)")
    for domain in DOMAIN_MARKERS:
        config.addinivalue_line("markers", f"{domain}: tests of the {domain} commands")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Config dict that keeps every default except the sleeps."""
    return {
        "service": {
            "type": "darwin",
            "data": {
                "label": "com.test.model-runner",
                "startup_wait_secs": 0,
            },
        },
        "verify": {
            "gpu_wait_secs": 0,
        },
    }


def write_config(home: Path, config: dict) -> Path:
    config_path = home / "config.json"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config), encoding="utf-8")
    return config_path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    return minimal_config_dict()


@pytest.fixture
def user_home(tmp_path: Path, monkeypatch) -> Path:
    """A fake $HOME; ~/Library, ~/.local and the rc files all live under it."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("SHELL", "/bin/zsh")
    # setenv records the original state so the value cmd_configure sets is undone
    monkeypatch.setenv("MODEL_RUNNER_HOST", "")
    monkeypatch.delenv("MODEL_RUNNER_HOST")
    return home


@pytest.fixture
def mrsetup_home(tmp_path: Path, monkeypatch, user_home: Path, minimal_config_dict: dict) -> Path:
    """Set up MRSETUP_HOME with a config file that skips the startup waits.

    Returns:
        Path to the mrsetup home directory
    """
    home = tmp_path / ".mrsetup"
    monkeypatch.setenv("MRSETUP_HOME", str(home))
    monkeypatch.setattr(mrsetup_logger, "_CONFIGURED", True)
    write_config(home, minimal_config_dict)
    return home


# =============================================================================
# External command fakes
# =============================================================================


class FakeShell:
    """Stands in for subprocess.run and shutil.which.

    Responses are matched by command prefix, most recently registered first;
    unmatched commands succeed with empty output. launchctl is simulated:
    'load <plist>' registers the plist's label, 'unload' removes it and
    'list' prints the loaded labels.
    """

    def __init__(self, monkeypatch):
        self.calls: list[list[str]] = []
        self._call_kwargs: list[tuple[list[str], dict]] = []
        self.tools: set[str] = set()
        self.loaded: set[str] = set()
        self.launchctl_load_registers = True
        self._responses: list[tuple[list[str], Callable[[list[str], dict], tuple[int, str, str]]]] = []
        monkeypatch.setattr(subprocess, "run", self.run)
        monkeypatch.setattr(shutil, "which", self.which)

    def on(
        self,
        *prefix: str,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        effect: Callable[[list[str], dict], Any] | None = None,
    ) -> None:
        """Register the result of commands starting with ``prefix``.

        ``effect`` runs before the result is returned (to create files, for example).
        """

        def respond(command: list[str], kwargs: dict) -> tuple[int, str, str]:
            if effect is not None:
                effect(command, kwargs)
            return returncode, stdout, stderr

        self._responses.append((list(prefix), respond))

    def which(self, name: str, *args, **kwargs) -> str | None:
        return f"/opt/homebrew/bin/{name}" if name in self.tools else None

    def ran(self, *prefix: str) -> bool:
        return any(call[: len(prefix)] == list(prefix) for call in self.calls)

    def kwargs_for(self, *prefix: str) -> dict:
        for call, kwargs in reversed(self._call_kwargs):
            if call[: len(prefix)] == list(prefix):
                return kwargs
        raise AssertionError(f"{prefix} was not run")

    def run(self, command, *args, **kwargs) -> subprocess.CompletedProcess:
        command = [str(part) for part in command]
        self.calls.append(command)
        self._call_kwargs.append((command, kwargs))

        for prefix, respond in reversed(self._responses):
            if command[: len(prefix)] == prefix:
                returncode, stdout, stderr = respond(command, kwargs)
                break
        else:
            if command[0] == "launchctl":
                returncode, stdout, stderr = self._launchctl(command[1:])
            else:
                returncode, stdout, stderr = 0, "", ""

        if kwargs.get("check") and returncode != 0:
            raise subprocess.CalledProcessError(returncode, command, output=stdout, stderr=stderr)
        return subprocess.CompletedProcess(command, returncode, stdout, stderr)

    def _launchctl(self, args: list[str]) -> tuple[int, str, str]:
        if args[0] == "list":
            lines = ["PID\tStatus\tLabel", "312\t0\tcom.apple.Finder"]
            lines += [f"4242\t0\t{label}" for label in sorted(self.loaded)]
            return 0, "\n".join(lines) + "\n", ""
        label = Path(args[1]).stem
        if args[0] == "load":
            if self.launchctl_load_registers:
                self.loaded.add(label)
            return 0, "", ""
        if args[0] == "unload":
            if label not in self.loaded:
                return 1, "", "Unload failed: 5: Input/output error\nTry running `launchctl bootout` as root"
            self.loaded.discard(label)
            return 0, "", ""
        return 0, "", ""


@pytest.fixture
def fake_shell(monkeypatch) -> FakeShell:
    return FakeShell(monkeypatch)


class FakeResponse:
    """Minimal requests.Response replacement."""

    def __init__(self, status_code: int = 200, chunks: list[bytes] | None = None):
        import requests

        self.status_code = status_code
        self._chunks = chunks or []
        self._http_error = requests.HTTPError

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise self._http_error(f"{self.status_code} Error")

    def iter_content(self, chunk_size: int = 1):
        yield from self._chunks

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def mac_host(monkeypatch) -> None:
    """Pretend to be macOS on Apple Silicon."""
    monkeypatch.setattr("platform.system", lambda: "Darwin")
    monkeypatch.setattr("platform.machine", lambda: "arm64")
