"""Configuration loading from environment variables and tmpsize.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "tmpsize.toml"
_SYSTEM_CONFIG_DIR = Path("/etc/tmpsize")


@dataclass
class TmpSizeConfig:
    """Where to write and how to remount."""

    root_dir: Path = Path("/")
    mount_bin: str = "mount"
    mount_point: str = "/tmp"
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> TmpSizeConfig:
    """Load configuration from environment variables and optional tmpsize.toml.

    Priority: environment variables > tmpsize.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        for candidate in [Path.cwd() / _CONFIG_FILENAME, _SYSTEM_CONFIG_DIR / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    mount_data = file_data.get("mount", {})

    return TmpSizeConfig(
        root_dir=Path(os.getenv("TMPSIZE_ROOT_DIR", file_data.get("root_dir", "/"))),
        mount_bin=os.getenv("TMPSIZE_MOUNT_BIN", mount_data.get("bin", "mount")),
        mount_point=os.getenv("TMPSIZE_MOUNT_POINT", mount_data.get("point", "/tmp")),
        log_level=os.getenv("TMPSIZE_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
