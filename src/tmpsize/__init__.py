"""tmpfs size configuration for /tmp.

Validates a size request, keeps a systemd drop-in for tmp.mount in sync with
it, and remounts the live /tmp. See tmpsize.apply for the entry points.
"""

from tmpsize.apply import TMP_SIZE_KEY, Target, apply_tmp_size, filesystem_only_apply, run, validate_tmp_size
from tmpsize.errors import BelowMinimumError, CommandError, InvalidFormatError, TmpSizeError
from tmpsize.size import DEFAULT_SIZE, MIN_SIZE, Bytes, Percent, SizeSpec, Unlimited, Unset, parse_size

__all__ = [
    "TMP_SIZE_KEY",
    "DEFAULT_SIZE",
    "MIN_SIZE",
    "BelowMinimumError",
    "Bytes",
    "CommandError",
    "InvalidFormatError",
    "Percent",
    "SizeSpec",
    "Target",
    "TmpSizeError",
    "Unlimited",
    "Unset",
    "apply_tmp_size",
    "filesystem_only_apply",
    "parse_size",
    "run",
    "validate_tmp_size",
]
