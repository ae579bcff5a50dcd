"""Unit tests for the mrsetup CLI entry points."""

import json

import pytest
import yaml

from mrsetup.cli import main, setup_main, uninstall_main

pytestmark = pytest.mark.cli


def test_main_without_command_shows_help(capsys):
    assert main([]) == 0
    assert "setup" in capsys.readouterr().out


def test_main_rejects_unknown_display(capsys):
    assert main(["--display", "xml", "config", "show"]) == 1
    assert "--display must be 'json' or 'yaml'" in capsys.readouterr().err


def test_config_show_json(capsys):
    assert main(["--display", "json", "config", "show", "colima"]) == 0

    captured = capsys.readouterr()
    output = json.loads(captured.out)
    assert output["content"] == {"cpu": 4, "memory": 8, "disk": 60, "vm_type": "vz"}
    assert "Configuration" in captured.err


def test_config_show_yaml_default(capsys):
    assert main(["config", "show", "shell"]) == 0

    output = yaml.safe_load(capsys.readouterr().out)
    assert output["content"]["env_var"] == "MODEL_RUNNER_HOST"


def test_failed_command_exits_one(capsys):
    assert main(["logs", "tail", "-n", "5"]) == 1

    captured = capsys.readouterr()
    assert "Log file not found" in captured.err
    assert yaml.safe_load(captured.out)["exists"] is False


def test_usage_prints_guide(capsys):
    assert main(["usage"]) == 0

    captured = capsys.readouterr()
    assert "Quick Start Guide" in captured.err
    assert captured.out == ""


def test_setup_entry_point_off_macos(monkeypatch, capsys, fake_shell):
    monkeypatch.setattr("sys.argv", ["setup-colima-gpu-model-runner"])
    monkeypatch.setattr("platform.system", lambda: "Linux")

    assert setup_main() == 1

    captured = capsys.readouterr()
    assert "This tool only works on macOS" in captured.err
    assert yaml.safe_load(captured.out)["completed"] is False


def test_uninstall_entry_point(monkeypatch, capsys, fake_shell):
    monkeypatch.setattr("sys.argv", ["uninstall-model-runner"])

    assert uninstall_main() == 0
    assert "model-runner uninstalled successfully" in capsys.readouterr().err


def test_version_flag(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("mrsetup ")


def test_failed_setup_honors_json_display(monkeypatch, capsys, fake_shell):
    monkeypatch.setattr("platform.system", lambda: "Linux")

    assert main(["--display", "json", "setup"]) == 1

    output = json.loads(capsys.readouterr().out)
    assert output["completed"] is False
    assert output["errors"] == ["This tool only works on macOS"]


def test_setup_entry_point_accepts_display_option(monkeypatch, capsys, fake_shell):
    monkeypatch.setattr("sys.argv", ["setup-colima-gpu-model-runner", "--display", "json"])
    monkeypatch.setattr("platform.system", lambda: "Linux")

    assert setup_main() == 1

    assert json.loads(capsys.readouterr().out)["completed"] is False


def test_uninstall_entry_point_accepts_display_option(monkeypatch, capsys, fake_shell):
    monkeypatch.setattr("sys.argv", ["uninstall-model-runner", "-d", "json"])

    assert uninstall_main() == 0

    output = json.loads(capsys.readouterr().out)
    assert "not_found" in output
