"""Unit tests for mrsetup.api.uninstall.cmd_uninstall."""

import pytest

from mrsetup.api.uninstall.cmd_uninstall import cmd_uninstall
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.uninstall


@pytest.fixture
def plugin_path(user_home):
    path = user_home / ".docker" / "cli-plugins" / "docker-model"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"plugin")
    return path


def test_cmd_uninstall_removes_everything(fake_shell, installed_binary, plist_path, plugin_path, service_log):
    plist_path.parent.mkdir(parents=True)
    plist_path.write_text("<plist/>", encoding="utf-8")
    fake_shell.loaded.add("com.test.model-runner")
    service_log.parent.mkdir(parents=True)
    service_log.write_text("log\n", encoding="utf-8")
    err_log = service_log.with_suffix(".err")
    err_log.write_text("err\n", encoding="utf-8")

    result = run_cmd(cmd_uninstall)

    assert result.success is True
    assert result.output["service_stopped"] is True
    assert set(result.output["removed"]) == {
        str(plist_path),
        str(installed_binary),
        str(plugin_path),
        str(service_log),
        str(err_log),
    }
    assert result.output["not_found"] == []
    for path in (plist_path, installed_binary, plugin_path, service_log, err_log):
        assert not path.exists()


def test_cmd_uninstall_nothing_installed(fake_shell, plist_path):
    result = run_cmd(cmd_uninstall)

    assert result.success is True
    assert result.output["service_stopped"] is False
    assert result.output["removed"] == []
    assert str(plist_path) in result.output["not_found"]
    assert not fake_shell.ran("launchctl", "unload")


def test_cmd_uninstall_keeps_err_without_log(fake_shell, user_home):
    err_log = user_home / "Library" / "Logs" / "model-runner.err"
    err_log.parent.mkdir(parents=True)
    err_log.write_text("err\n", encoding="utf-8")

    run_cmd(cmd_uninstall)

    assert err_log.exists()


def test_cmd_uninstall_lists_kept_components(fake_shell, user_home):
    zshrc = user_home / ".zshrc"
    zshrc.write_text('export MODEL_RUNNER_HOST="http://localhost:12434"\n', encoding="utf-8")

    result = run_cmd(cmd_uninstall)

    assert result.output["kept"] == [
        "llama.cpp",
        "Docker CLI",
        "Colima",
        "MODEL_RUNNER_HOST environment variable in shell profile",
    ]
    assert "MODEL_RUNNER_HOST" in result.output["warnings"][0]
    assert zshrc.read_text(encoding="utf-8").count("MODEL_RUNNER_HOST") == 1
