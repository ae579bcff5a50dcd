"""Unit tests for mrsetup.api.config.MRSetupConfig."""

import json

import pytest

from mrsetup.api.config.MRSetupConfig import MRSetupConfig
from tests.unit.conftest import minimal_config_dict, write_config

pytestmark = pytest.mark.config


def test_load_without_file_uses_defaults(mrsetup_home):
    (mrsetup_home / "config.json").unlink()

    config = MRSetupConfig.load()

    assert config.binary.source == "build"
    assert config.service.type == "darwin"
    assert config.service.data.label == "com.liquescent.model-runner"  # type: ignore[attr-defined]
    assert config.service.data.port == 12434  # type: ignore[attr-defined]
    assert config.colima.start_args() == [
        "colima",
        "start",
        "--cpu",
        "4",
        "--memory",
        "8",
        "--disk",
        "60",
        "--vm-type=vz",
    ]
    assert config.host_url == "http://localhost:12434"


def test_load_reads_file(mrsetup_home):
    config = MRSetupConfig.load()

    assert config.service.data.label == "com.test.model-runner"  # type: ignore[attr-defined]
    assert config.service.data.startup_wait_secs == 0  # type: ignore[attr-defined]
    assert config.verify.gpu_wait_secs == 0


def test_binary_paths_expand_home(user_home):
    config = MRSetupConfig()

    assert config.binary.bin_path == user_home / ".local" / "bin" / "model-runner"
    assert config.binary.repo_dir == user_home / ".local" / "share" / "model-runner" / "repo"
    assert config.docker.model_plugin_path == user_home / ".docker" / "cli-plugins" / "docker-model"


def test_load_invalid_json(mrsetup_home):
    (mrsetup_home / "config.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON"):
        MRSetupConfig.load()


def test_load_non_object(mrsetup_home):
    (mrsetup_home / "config.json").write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a JSON object"):
        MRSetupConfig.load()


def test_load_unknown_section(mrsetup_home):
    write_config(mrsetup_home, {**minimal_config_dict(), "bogus": {}})

    with pytest.raises(ValueError, match="bogus"):
        MRSetupConfig.load()


def test_load_rejects_label_without_dots(mrsetup_home):
    cfg = minimal_config_dict()
    cfg["service"]["data"]["label"] = "modelrunner"
    write_config(mrsetup_home, cfg)

    with pytest.raises(ValueError, match="reverse DNS"):
        MRSetupConfig.load()


def test_load_rejects_unknown_service_type(mrsetup_home):
    cfg = minimal_config_dict()
    cfg["service"]["type"] = "systemd"
    write_config(mrsetup_home, cfg)

    with pytest.raises(ValueError, match="Unknown service type"):
        MRSetupConfig.load()


def test_download_source_requires_url(mrsetup_home):
    cfg = minimal_config_dict()
    cfg["binary"] = {"source": "download"}
    write_config(mrsetup_home, cfg)

    with pytest.raises(ValueError, match="download_url"):
        MRSetupConfig.load()


def test_save_writes_loadable_file(mrsetup_home):
    config = MRSetupConfig.load()
    config.colima.cpu = 6
    config.save()

    raw = json.loads((mrsetup_home / "config.json").read_text(encoding="utf-8"))
    assert raw["colima"]["cpu"] == 6
    assert raw["service"]["data"]["label"] == "com.test.model-runner"
    assert not (mrsetup_home / "config.json.tmp").exists()
    assert MRSetupConfig.load().colima.cpu == 6


def test_host_url_follows_port_and_host(mrsetup_home):
    cfg = minimal_config_dict()
    cfg["service"]["data"]["port"] = 9999
    cfg["shell"] = {"host": "127.0.0.1"}
    write_config(mrsetup_home, cfg)

    assert MRSetupConfig.load().host_url == "http://127.0.0.1:9999"


def test_load_rejects_unknown_service_key(mrsetup_home):
    cfg = minimal_config_dict()
    cfg["service"]["lable"] = "com.test.typo"
    write_config(mrsetup_home, cfg)

    with pytest.raises(ValueError, match="lable"):
        MRSetupConfig.load()
