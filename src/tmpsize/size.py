"""Parsing of tmpfs size specifications.

Accepted forms:

    ""          unset, fall back to the default size
    "0"         no size cap
    "20%"       percentage of memory, 1..100
    "100m"      absolute size, optional k/K/m/M/g/G suffix (powers of 1024)

Absolute sizes below 16 MiB are rejected after unit expansion.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tmpsize.errors import BelowMinimumError, InvalidFormatError

MIN_SIZE = 16 * 1024 * 1024
DEFAULT_SIZE = "50%"

_UNITS = {"": 1, "k": 1024, "m": 1024**2, "g": 1024**3}

_BYTES_RE = re.compile(r"([0-9]+)([kKmMgG]?)")
_PERCENT_RE = re.compile(r"([0-9]+)%")

# 19 digits already exceed any tmpfs size; also keeps int() within its digit limit
_MAX_DIGITS = 19


@dataclass(frozen=True)
class Bytes:
    token: str
    value: int


@dataclass(frozen=True)
class Percent:
    token: str
    value: int


@dataclass(frozen=True)
class Unlimited:
    @property
    def token(self) -> str:
        return "0"


@dataclass(frozen=True)
class Unset:
    pass


SizeSpec = Bytes | Percent | Unlimited | Unset


def _to_int(raw: str, digits: str) -> int:
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise InvalidFormatError(raw, "number too large")
    return int(digits)


def parse_size(raw: str) -> SizeSpec:
    """Validate ``raw`` and return its SizeSpec.

    The token kept on the result is ``raw`` itself, so units and case
    survive into the override file unchanged.
    """
    if raw == "":
        return Unset()
    if raw == "0":
        return Unlimited()

    if raw.endswith("%"):
        m = _PERCENT_RE.fullmatch(raw)
        if not m:
            raise InvalidFormatError(raw, "invalid percentage")
        pct = _to_int(raw, m.group(1))
        if not 1 <= pct <= 100:
            raise InvalidFormatError(raw, "percentage must be between 1 and 100")
        return Percent(raw, pct)

    m = _BYTES_RE.fullmatch(raw)
    if not m:
        raise InvalidFormatError(raw, "expected a number with an optional k, m or g suffix")
    value = _to_int(raw, m.group(1)) * _UNITS[m.group(2).lower()]
    if value < MIN_SIZE:
        raise BelowMinimumError(raw)
    return Bytes(raw, value)
