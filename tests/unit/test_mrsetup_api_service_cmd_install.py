"""Unit tests for mrsetup.api.service.cmd_install and cmd_uninstall."""

import pytest

from mrsetup.api.service.cmd_install import cmd_install
from mrsetup.api.service.cmd_uninstall import cmd_uninstall
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.service


def test_cmd_install_requires_binary(fake_shell):
    result = run_cmd(cmd_install)

    assert result.success is False
    assert "binary not found" in result.result
    assert not fake_shell.ran("launchctl", "load")


def test_cmd_install_loads_service(fake_shell, installed_binary, plist_path):
    result = run_cmd(cmd_install)

    assert result.success is True
    assert result.result == "model-runner service is running!"
    assert result.output["plist_path"] == str(plist_path)
    assert str(installed_binary) in plist_path.read_text(encoding="utf-8")
    assert "com.test.model-runner" in fake_shell.loaded


def test_cmd_install_reports_start_failure(fake_shell, installed_binary):
    fake_shell.launchctl_load_registers = False

    result = run_cmd(cmd_install)

    assert result.success is False
    assert "Check logs at" in result.output["errors"][0]


def test_cmd_uninstall_removes_plist_only_if_present(fake_shell, plist_path):
    result = run_cmd(cmd_uninstall)

    assert result.success is True
    assert result.output["plist_removed"] is False
    assert result.result == "Service not running; LaunchAgent plist not found"


def test_cmd_uninstall_after_install(fake_shell, installed_binary, plist_path):
    run_cmd(cmd_install)

    result = run_cmd(cmd_uninstall)

    assert result.success is True
    assert result.output["was_loaded"] is True
    assert result.output["plist_removed"] is True
    assert result.result == "Service stopped; LaunchAgent removed"
    assert not plist_path.exists()
    assert fake_shell.loaded == set()


def test_cmd_uninstall_plist_without_loaded_service(fake_shell, plist_path):
    plist_path.parent.mkdir(parents=True)
    plist_path.write_text("<plist/>", encoding="utf-8")

    result = run_cmd(cmd_uninstall)

    assert result.output["was_loaded"] is False
    assert result.output["plist_removed"] is True
    assert not fake_shell.ran("launchctl", "unload")
