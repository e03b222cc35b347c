"""Apply a tmp.size setting to a system or to an image root.

Both entry points go through apply_tmp_size() with a Target:

- run():                   live system, remounts /tmp after persisting
- filesystem_only_apply(): arbitrary root, writes only, never runs commands

Nothing about the currently mounted size is remembered between calls; every
apply recomputes the options from the request (or the default) and reasserts
them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Any

from tmpsize.config import TmpSizeConfig, load_config
from tmpsize.errors import InvalidFormatError
from tmpsize.fragment import fragment_path, mount_options, remove_fragment, render_fragment, write_fragment
from tmpsize.mount import remount
from tmpsize.size import DEFAULT_SIZE, SizeSpec, Unset, parse_size

logger = logging.getLogger(__name__)

TMP_SIZE_KEY = "tmp.size"


@dataclass
class Target:
    """Where the override lands, and how to remount (None: don't)."""

    root: Path
    remount: Callable[[str], None] | None = None


def _size_from_conf(conf: Mapping[str, Any]) -> SizeSpec | None:
    if TMP_SIZE_KEY not in conf:
        return None
    raw = conf[TMP_SIZE_KEY]
    if raw is None:
        raw = ""
    if not isinstance(raw, str):
        raise InvalidFormatError(str(raw), f"expected a string, got {type(raw).__name__}")
    return parse_size(raw)


def validate_tmp_size(conf: Mapping[str, Any]) -> None:
    """Check tmp.size without touching anything."""
    _size_from_conf(conf)


def apply_tmp_size(conf: Mapping[str, Any], target: Target) -> None:
    size = _size_from_conf(conf)
    if size is None:
        return

    path = fragment_path(target.root)
    if isinstance(size, Unset):
        remove_fragment(path)
        token = DEFAULT_SIZE
    else:
        token = size.token
        write_fragment(path, render_fragment(token))

    if target.remount is not None:
        # also when the fragment was already up to date
        target.remount(mount_options(token, remount=True))


def run(conf: Mapping[str, Any], config: TmpSizeConfig | None = None) -> None:
    """Persist the setting under the configured root and remount /tmp."""
    config = config or load_config()
    invoker = partial(remount, mount_bin=config.mount_bin, mount_point=config.mount_point)
    apply_tmp_size(conf, Target(root=config.root_dir, remount=invoker))


def filesystem_only_apply(root: Path | str, conf: Mapping[str, Any]) -> None:
    """Write the override into an image rooted at ``root``."""
    logger.debug("Filesystem-only apply into %s", root)
    apply_tmp_size(conf, Target(root=Path(root)))
