"""Remount of the live /tmp tmpfs with new options."""

from __future__ import annotations

import logging
import subprocess

from tmpsize.errors import CommandError

logger = logging.getLogger(__name__)

TMPFS_MOUNT_POINT = "/tmp"


def remount(options: str, *, mount_bin: str = "mount", mount_point: str = TMPFS_MOUNT_POINT) -> None:
    """Run ``mount -o <options> <mount_point>`` once.

    A non-zero exit raises CommandError; failure to execute the binary
    surfaces as the OSError from subprocess.
    """
    cmd = [mount_bin, "-o", options, mount_point]
    logger.info("Running: %s", " ".join(cmd))

    result = subprocess.run(cmd, capture_output=True, text=True, errors="replace")

    if result.returncode != 0:
        output = (result.stderr or result.stdout or "").strip()
        logger.error("%s error (rc=%d): %s", mount_bin, result.returncode, output)
        raise CommandError(cmd, result.returncode, output)
