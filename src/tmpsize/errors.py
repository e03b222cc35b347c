"""Error types raised while validating and applying tmpfs size settings."""

from __future__ import annotations


class TmpSizeError(Exception):
    """Base class for tmpsize errors."""


class InvalidFormatError(TmpSizeError, ValueError):
    """The size string does not follow the accepted grammar."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f'cannot set tmpfs size "{value}": {reason}')


class BelowMinimumError(TmpSizeError, ValueError):
    """An absolute size below the 16 MiB floor."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("size is less than 16Mb")


class CommandError(TmpSizeError):
    """An external command exited with a non-zero status."""

    def __init__(self, argv: list[str], returncode: int, output: str = "") -> None:
        self.argv = argv
        self.returncode = returncode
        self.output = output
        msg = f"{' '.join(argv)} failed with exit status {returncode}"
        if output:
            msg += f": {output}"
        super().__init__(msg)
