"""Tests for configuration loading."""

import pytest
from pathlib import Path

from tmpsize.config import load_config

ENV_KEYS = ["TMPSIZE_ROOT_DIR", "TMPSIZE_MOUNT_BIN", "TMPSIZE_MOUNT_POINT", "TMPSIZE_LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config(tmp_path / "missing.toml")
        assert config.root_dir == Path("/")
        assert config.mount_bin == "mount"
        assert config.mount_point == "/tmp"
        assert config.log_level == "INFO"

    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TMPSIZE_ROOT_DIR", str(tmp_path / "image"))
        monkeypatch.setenv("TMPSIZE_MOUNT_BIN", "/usr/bin/mount")

        config = load_config(tmp_path / "missing.toml")
        assert config.root_dir == tmp_path / "image"
        assert config.mount_bin == "/usr/bin/mount"

    def test_toml_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        toml_path = tmp_path / "tmpsize.toml"
        toml_path.write_text("""
root_dir = "/srv/image"
log_level = "DEBUG"

[mount]
bin = "/sbin/mount"
point = "/var/tmp"
""")
        config = load_config(toml_path)
        assert config.root_dir == Path("/srv/image")
        assert config.log_level == "DEBUG"
        assert config.mount_bin == "/sbin/mount"
        assert config.mount_point == "/var/tmp"

    def test_cwd_file_discovered(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "tmpsize.toml").write_text('log_level = "WARNING"\n')
        config = load_config()
        assert config.log_level == "WARNING"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TMPSIZE_MOUNT_POINT", "/mnt/scratch")

        toml_path = tmp_path / "tmpsize.toml"
        toml_path.write_text("""
[mount]
point = "/var/tmp"
""")
        config = load_config(toml_path)
        assert config.mount_point == "/mnt/scratch"  # env wins
