"""Unit tests for mrsetup.api.shell commands."""

import os

import pytest

from mrsetup.api.shell.cmd_configure import cmd_configure
from mrsetup.api.shell.cmd_unconfigure import cmd_unconfigure
from tests.unit.conftest import minimal_config_dict, run_cmd, write_config

pytestmark = pytest.mark.shell

BLOCK = '\n# Docker Model Runner (GPU-accelerated)\nexport MODEL_RUNNER_HOST="http://localhost:12434"\n'


def test_cmd_configure_appends_block(user_home):
    zshrc = user_home / ".zshrc"
    zshrc.write_text("alias ll='ls -l'\n", encoding="utf-8")

    result = run_cmd(cmd_configure)

    assert result.success is True
    assert result.output["appended"] is True
    assert zshrc.read_text(encoding="utf-8") == "alias ll='ls -l'\n" + BLOCK
    assert os.environ["MODEL_RUNNER_HOST"] == "http://localhost:12434"
    assert f"source {zshrc}" in result.output["warnings"][0]


def test_cmd_configure_is_idempotent(user_home):
    run_cmd(cmd_configure)
    result = run_cmd(cmd_configure)

    content = (user_home / ".zshrc").read_text(encoding="utf-8")
    assert content.count("export MODEL_RUNNER_HOST=") == 1
    assert result.output["appended"] is False
    assert "already configured" in result.result


def test_cmd_configure_missing_trailing_newline(user_home):
    zshrc = user_home / ".zshrc"
    zshrc.write_text("export PATH=/opt/homebrew/bin:$PATH", encoding="utf-8")

    run_cmd(cmd_configure)

    assert zshrc.read_text(encoding="utf-8") == "export PATH=/opt/homebrew/bin:$PATH\n" + BLOCK


def test_cmd_configure_bash(monkeypatch, user_home):
    monkeypatch.setenv("SHELL", "/bin/bash")

    result = run_cmd(cmd_configure)

    assert result.output["rc_file"] == str(user_home / ".bashrc")
    assert (user_home / ".bashrc").exists()
    assert not (user_home / ".zshrc").exists()


def test_cmd_configure_unknown_shell(monkeypatch, user_home):
    monkeypatch.setenv("SHELL", "/usr/local/bin/fish")

    result = run_cmd(cmd_configure)

    assert result.success is True
    assert result.output["rc_file"] == ""
    assert "manually" in result.output["warnings"][0]
    assert os.environ["MODEL_RUNNER_HOST"] == "http://localhost:12434"


def test_cmd_configure_explicit_rc_file(mrsetup_home, user_home):
    cfg = minimal_config_dict()
    cfg["shell"] = {"rc_file": "~/.config/zsh/env.zsh"}
    write_config(mrsetup_home, cfg)

    result = run_cmd(cmd_configure)

    target = user_home / ".config" / "zsh" / "env.zsh"
    assert result.output["rc_file"] == str(target)
    assert target.read_text(encoding="utf-8") == BLOCK


def test_cmd_unconfigure_restores_file(user_home):
    zshrc = user_home / ".zshrc"
    original = "alias ll='ls -l'\n"
    zshrc.write_text(original, encoding="utf-8")
    run_cmd(cmd_configure)

    result = run_cmd(cmd_unconfigure)

    assert result.success is True
    assert result.output["removed"] is True
    assert zshrc.read_text(encoding="utf-8") == original


def test_cmd_unconfigure_nothing_to_remove(user_home):
    (user_home / ".zshrc").write_text("alias ll='ls -l'\n", encoding="utf-8")

    result = run_cmd(cmd_unconfigure)

    assert result.success is True
    assert result.output["removed"] is False


def test_cmd_configure_non_utf8_profile(user_home):
    zshrc = user_home / ".zshrc"
    original = b"# caf\xe9 alias\nalias ll='ls -l'\n"
    zshrc.write_bytes(original)

    result = run_cmd(cmd_configure)

    assert result.success is True
    assert result.output["appended"] is True
    assert zshrc.read_bytes() == original + BLOCK.encode("utf-8")

    again = run_cmd(cmd_configure)
    assert again.output["appended"] is False
    assert zshrc.read_bytes().count(b"export MODEL_RUNNER_HOST=") == 1


def test_cmd_configure_unreadable_profile(user_home):
    (user_home / ".zshrc").mkdir()

    result = run_cmd(cmd_configure)

    assert result.success is False
    assert result.output["appended"] is False
    assert result.output["errors"]
    assert "Failed to update" in result.result


def test_cmd_unconfigure_non_utf8_profile(user_home):
    zshrc = user_home / ".zshrc"
    original = b"# caf\xe9 alias\nalias ll='ls -l'\n"
    zshrc.write_bytes(original + BLOCK.encode("utf-8"))

    result = run_cmd(cmd_unconfigure)

    assert result.success is True
    assert result.output["removed"] is True
    assert zshrc.read_bytes() == original


def test_cmd_unconfigure_unreadable_profile(user_home):
    (user_home / ".zshrc").mkdir()

    result = run_cmd(cmd_unconfigure)

    assert result.success is False
    assert result.output["errors"]
    assert result.output["removed"] is False
