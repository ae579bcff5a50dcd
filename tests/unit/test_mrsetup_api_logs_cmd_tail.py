"""Unit tests for mrsetup.api.logs.cmd_tail."""

import pytest

from mrsetup.api.logs.cmd_tail import cmd_tail
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.logs


def test_cmd_tail_last_lines(service_log):
    service_log.parent.mkdir(parents=True)
    service_log.write_text("".join(f"line {i}\n" for i in range(100)), encoding="utf-8")

    result = run_cmd(cmd_tail, lines=3)

    assert result.success is True
    assert result.output["lines"] == ["line 97", "line 98", "line 99"]


def test_cmd_tail_error_log(user_home):
    err = user_home / "Library" / "Logs" / "model-runner.err"
    err.parent.mkdir(parents=True)
    err.write_text("panic: bind: address already in use\n", encoding="utf-8")

    result = run_cmd(cmd_tail, stream="err")

    assert result.output["log_path"] == str(err)
    assert result.output["lines"] == ["panic: bind: address already in use"]


def test_cmd_tail_missing_log():
    result = run_cmd(cmd_tail)

    assert result.success is False
    assert result.output["exists"] is False
    assert "not found" in result.result
