"""systemd drop-in for tmp.mount: rendering and idempotent on-disk state.

Layout (relative to the target root):
    etc/systemd/system/
    └── tmp.mount.d/
        ├── override.conf       # managed here
        └── ...                 # fragments owned by others, never touched
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

SERVICES_DIR = Path("etc/systemd/system")
OVERRIDE_SUBDIR = "tmp.mount.d"
OVERRIDE_FILENAME = "override.conf"

STATIC_OPTIONS = "mode=1777,strictatime,nosuid,nodev"

_OPTIONS_PREFIX = f"Options={STATIC_OPTIONS},size="


def fragment_path(root: Path | str) -> Path:
    return Path(root) / SERVICES_DIR / OVERRIDE_SUBDIR / OVERRIDE_FILENAME


def mount_options(token: str, *, remount: bool = False) -> str:
    opts = f"{STATIC_OPTIONS},size={token}"
    return f"remount,{opts}" if remount else opts


def render_fragment(token: str) -> str:
    return f"[Mount]\nOptions={mount_options(token)}\n"


def write_fragment(path: Path, content: str) -> bool:
    """Write ``content`` to ``path`` unless it already holds exactly that.

    Returns True when the file was (re)written. An identical file is left
    alone, including its mtime.
    """
    data = content.encode("utf-8")
    try:
        if path.read_bytes() == data:
            logger.debug("Override unchanged: %s", path)
            return False
    except FileNotFoundError:
        pass

    path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.info("Override written: %s", path)
    return True


def remove_fragment(path: Path) -> bool:
    """Remove the managed fragment. Returns False if it was already gone."""
    try:
        path.unlink()
    except FileNotFoundError:
        logger.debug("Override already absent: %s", path)
        return False
    logger.info("Override removed: %s", path)
    return True


def read_fragment_size(path: Path) -> str | None:
    """Return the size token of a managed fragment, or None."""
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return None
    if len(lines) != 2 or lines[0] != "[Mount]" or not lines[1].startswith(_OPTIONS_PREFIX):
        logger.warning("Unrecognized override content in %s", path)
        return None
    return lines[1][len(_OPTIONS_PREFIX):] or None
