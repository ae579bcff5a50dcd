"""Unit tests for mrsetup.api.config.cmd_show."""

import pytest

from mrsetup.api.config.cmd_show import cmd_show
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.config


def test_cmd_show_all_sections(mrsetup_home):
    result = run_cmd(cmd_show)

    assert result.success is True
    assert set(result.output["content"]) == {"binary", "service", "colima", "shell", "docker", "verify", "log"}
    assert result.output["file_exists"] is True
    assert result.output["warnings"] == []


def test_cmd_show_one_section(mrsetup_home):
    result = run_cmd(cmd_show, "service")

    assert result.success is True
    assert result.output["section"] == "service"
    assert result.output["content"]["data"]["label"] == "com.test.model-runner"


def test_cmd_show_unknown_section(mrsetup_home):
    result = run_cmd(cmd_show, "nope")

    assert result.success is False
    assert "Unknown section" in result.output["errors"][0]


def test_cmd_show_defaults_warns(mrsetup_home):
    (mrsetup_home / "config.json").unlink()

    result = run_cmd(cmd_show)

    assert result.success is True
    assert result.output["file_exists"] is False
    assert "showing defaults" in result.output["warnings"][0]


def test_cmd_show_invalid_config(mrsetup_home):
    (mrsetup_home / "config.json").write_text("{", encoding="utf-8")

    result = run_cmd(cmd_show)

    assert result.success is False
    assert "Invalid JSON" in result.result
