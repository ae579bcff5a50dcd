"""Unit tests for mrsetup.api.deps.cmd_install."""

import pytest

from mrsetup.api.deps.cmd_install import cmd_install
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.deps


@pytest.fixture
def all_tools(fake_shell):
    fake_shell.tools.update({"llama-server", "go", "docker"})
    fake_shell.on("go", "version", stdout="go version go1.22.3 darwin/arm64\n")
    fake_shell.on("docker", "--version", stdout="Docker version 27.1.1, build 6312585\n")
    return fake_shell


def test_cmd_install_everything_present(all_tools):
    result = run_cmd(cmd_install)

    assert result.success is True
    assert result.output["installed"] == []
    assert result.output["present"] == {
        "llama.cpp": "installed",
        "Go": "go version go1.22.3 darwin/arm64",
        "Docker CLI": "Docker version 27.1.1, build 6312585",
    }
    assert result.output["docker_model_plugin"] is True
    assert result.output["xcode_pending"] is False
    assert not all_tools.ran("brew")


def test_cmd_install_installs_missing_formulae(fake_shell):
    fake_shell.tools.add("docker")

    result = run_cmd(cmd_install)

    assert result.success is True
    assert result.output["installed"] == ["llama.cpp", "go"]
    assert fake_shell.ran("brew", "install", "llama.cpp")
    assert fake_shell.ran("brew", "install", "go")
    assert not fake_shell.ran("brew", "install", "docker")


def test_cmd_install_brew_failure_is_fatal(fake_shell):
    fake_shell.on("brew", "install", "llama.cpp", returncode=1, stderr="Error: network down")

    result = run_cmd(cmd_install)

    assert result.success is False
    assert "Failed to install llama.cpp" in result.result
    assert not fake_shell.ran("brew", "install", "go")


def test_cmd_install_download_source_skips_go_and_xcode(fake_shell):
    fake_shell.tools.update({"llama-server", "docker"})

    result = run_cmd(cmd_install, source="download")

    assert result.success is True
    assert "Go" not in result.output["present"]
    assert not fake_shell.ran("brew", "install", "go")
    assert not fake_shell.ran("xcode-select")


def test_cmd_install_missing_plugin_warns(all_tools):
    all_tools.on("docker", "model", returncode=1, stderr="'model' is not a docker command")

    result = run_cmd(cmd_install)

    assert result.success is True
    assert result.output["docker_model_plugin"] is False
    assert any("brew upgrade docker" in w for w in result.output["warnings"])
    assert all_tools.ran("docker", "model", "--help")


def test_cmd_install_plugin_help_fallback(all_tools):
    all_tools.on("docker", "model", "version", returncode=1)

    result = run_cmd(cmd_install)

    assert result.output["docker_model_plugin"] is True


def test_cmd_install_xcode_pending(all_tools):
    all_tools.on("xcode-select", "-p", returncode=2, stderr="unable to get active developer directory")

    result = run_cmd(cmd_install)

    assert result.success is True
    assert result.output["xcode_pending"] is True
    assert all_tools.ran("xcode-select", "--install")
    assert any("run setup again" in w for w in result.output["warnings"])
