"""Small console dump helpers and byte-size conversions."""

from __future__ import annotations

import sys

from emberkit.textops import bool_to_string

_UNIT = 1024


def dump(*args: object) -> None:
    """Print the arguments separated by tabs, followed by a newline."""
    sys.stdout.write("\t".join(str(arg) for arg in args) + "\n")


def dump_bool(value: bool) -> None:
    """Print a boolean as TRUE or FALSE."""
    sys.stdout.write(bool_to_string(bool(value)) + "\n")


def dump_raw(raw: bytes | bytearray | str) -> None:
    """Print raw characters one for one, followed by a newline."""
    text = raw if isinstance(raw, str) else bytes(raw).decode("latin-1")
    sys.stdout.write(text + "\n")


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")


def byte_to_kb(size: int) -> float:
    """Convert a byte count to kibibytes."""
    _check_size(size)
    return size / _UNIT


def byte_to_mb(size: int) -> float:
    """Convert a byte count to mebibytes."""
    _check_size(size)
    return size / _UNIT / _UNIT


def byte_to_gb(size: int) -> float:
    """Convert a byte count to gibibytes."""
    _check_size(size)
    return size / _UNIT / _UNIT / _UNIT


def byte_to_human_readable(size: int) -> str:
    """Render a byte count as bytes, K, M or G with two decimals above bytes."""
    _check_size(size)
    if size < _UNIT:
        return "%dB" % size
    if size < _UNIT ** 2:
        return "%.2fK" % byte_to_kb(size)
    if size < _UNIT ** 3:
        return "%.2fM" % byte_to_mb(size)
    return "%.2fG" % byte_to_gb(size)