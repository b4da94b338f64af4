"""Free-standing text helpers: splitting, joining, trimming, padding and conversions."""

from __future__ import annotations

import re
from collections.abc import Iterable

WHITESPACE = " \t\n\v\f\r"

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_FLOAT_RE = re.compile(
    r"""
    [ \t\n\v\f\r]*
    (?P<number>
        [+-]?
        (?:
            (?P<hex>0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)
          | (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?
          | inf(?:inity)?
          | nan
        )
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def _ascii_upper(text: str) -> str:
    return text.translate(_ASCII_UPPER)


def split_by_character(text: str, delimiter: str) -> list[str]:
    """Split on a single character, keeping empty pieces; an empty text gives []."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    if not text:
        return []
    return text.split(delimiter)


def split_by_string(text: str, delimiter: str) -> list[str]:
    """Split on a whole delimiter string, keeping empty pieces."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return text.split(delimiter)


def split_by_character_set(text: str, delimiters: str) -> list[str]:
    """Split on any character of ``delimiters``, dropping empty pieces."""
    pieces: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delimiters:
            if current:
                pieces.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        pieces.append("".join(current))
    return pieces


def concat(items: Iterable[str], separator: str = "") -> str:
    """Join the items with ``separator`` between each pair."""
    return separator.join(items)


def common_prefix(first: str, second: str, icase: bool = False) -> str:
    """Return the leading part ``first`` shares with ``second``."""
    length = 0
    for a, b in zip(first, second):
        if icase:
            a, b = _ascii_upper(a), _ascii_upper(b)
        if a != b:
            break
        length += 1
    return first[:length]


def common_suffix(first: str, second: str, icase: bool = False) -> str:
    """Return the trailing part ``first`` shares with ``second``."""
    length = 0
    for a, b in zip(reversed(first), reversed(second)):
        if icase:
            a, b = _ascii_upper(a), _ascii_upper(b)
        if a != b:
            break
        length += 1
    return first[len(first) - length:]


def left_pad(text: str, width: int, fillchar: str = " ") -> str:
    """Pad on the left with ``fillchar`` up to ``width`` characters."""
    return text.rjust(width, fillchar)


def right_pad(text: str, width: int, fillchar: str = " ") -> str:
    """Pad on the right with ``fillchar`` up to ``width`` characters."""
    return text.ljust(width, fillchar)


def trim_left(text: str, chars: str | None = None) -> str:
    """Strip leading characters in ``chars`` (ASCII whitespace by default)."""
    return text.lstrip(WHITESPACE if chars is None else chars)


def trim_right(text: str, chars: str | None = None) -> str:
    """Strip trailing characters in ``chars`` (ASCII whitespace by default)."""
    return text.rstrip(WHITESPACE if chars is None else chars)


def trim(text: str, chars: str | None = None) -> str:
    """Strip characters in ``chars`` (ASCII whitespace by default) from both ends."""
    return text.strip(WHITESPACE if chars is None else chars)


def to_int(text: str) -> int:
    """Parse a leading integer, ignoring what follows; 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def to_float(text: str) -> float:
    """Parse a leading floating-point number, ignoring what follows; 0.0 when there is none."""
    match = _FLOAT_RE.match(text)
    if not match:
        return 0.0
    number = match.group("number")
    if match.group("hex"):
        return float.fromhex(number)
    return float(number)


def to_bool(text: str) -> bool:
    """True for a non-zero leading integer or for "true"/"yes" in any case."""
    upper = _ascii_upper(text)
    return to_int(upper) != 0 or upper in ("TRUE", "YES")


def bool_to_string(value: bool, uppercase: bool = True) -> str:
    """Render a boolean as TRUE/FALSE or true/false."""
    word = "TRUE" if value else "FALSE"
    return word if uppercase else word.lower()


def float_to_string(value: float, ndigit: int | None = None) -> str:
    """Render a float with ``ndigit`` decimals, or in general form when omitted."""
    if ndigit is None:
        return "%g" % value
    if ndigit < 0:
        raise ValueError("ndigit must not be negative")
    return "%.*f" % (ndigit, value)


def list_to_string(items: Iterable[str]) -> str:
    """Render strings as a bracketed, comma separated list."""
    return "[" + ", ".join(items) + "]"