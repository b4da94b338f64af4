"""A mutable text value with chainable editing, searching and conversion methods."""

from __future__ import annotations

import string

from emberkit import textops

NOT_FOUND = -1

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
_ALPHA = frozenset(string.ascii_letters)
_DIGIT = frozenset(string.digits)
_SPACE = frozenset(textops.WHITESPACE)


def _lower(text: str) -> str:
    return text.translate(_TO_LOWER)


class Text:
    """A mutable string; editing methods change it in place and return it for chaining.

    Index arguments accept negative values counting from the end (-1 is the
    last character); ranges given as ``start``/``end`` include both ends.
    """

    NOT_FOUND = NOT_FOUND

    def __init__(self, value: str | Text | int | float = "") -> None:
        if isinstance(value, Text):
            self._value = value._value
        elif isinstance(value, str):
            self._value = value
        elif isinstance(value, bool):
            raise TypeError("cannot build Text from a bool")
        elif isinstance(value, int):
            self._value = str(value)
        elif isinstance(value, float):
            self._value = textops.float_to_string(value)
        else:
            raise TypeError(f"cannot build Text from {type(value).__name__}")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Text({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Text):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    # -- indexing helpers -------------------------------------------------

    def _index(self, index: int) -> int:
        size = len(self._value)
        position = size + index if index < 0 else index
        if not 0 <= position <= size:
            raise IndexError(f"index {index} out of range for length {size}")
        return position

    def _range(self, start: int, end: int) -> tuple[int, int]:
        first, last = self._index(start), self._index(end)
        if last < first:
            raise ValueError("end must not come before start")
        return first, last

    def _splice(self, position: int, count: int, replacement: str) -> Text:
        if count < 0:
            raise ValueError("count must not be negative")
        value = self._value
        self._value = value[:position] + replacement + value[position + count:]
        return self

    # -- access -----------------------------------------------------------

    def char_at(self, index: int) -> str:
        """Return the character at ``index``."""
        position = self._index(index)
        if position >= len(self._value):
            raise IndexError(f"index {index} out of range for length {len(self._value)}")
        return self._value[position]

    def substr_from_to(self, start: int, end: int) -> str:
        first, last = self._range(start, end)
        return self._value[first:last + 1]

    def substr_from(self, start: int) -> str:
        return self._value[self._index(start):]

    def substr_to(self, end: int) -> str:
        return self._value[:self._index(end) + 1]

    def substr(self, index: int, count: int) -> str:
        if count < 0:
            raise ValueError("count must not be negative")
        position = self._index(index)
        return self._value[position:position + count]

    # -- replacing --------------------------------------------------------

    def replace_from_to(self, start: int, end: int, replacement: str) -> Text:
        first, last = self._range(start, end)
        return self._splice(first, last - first + 1, replacement)

    def replace_from(self, start: int, replacement: str) -> Text:
        position = self._index(start)
        return self._splice(position, len(self._value) - position, replacement)

    def replace_to(self, end: int, replacement: str) -> Text:
        return self._splice(0, self._index(end) + 1, replacement)

    def replace(self, index: int, count: int, replacement: str) -> Text:
        return self._splice(self._index(index), count, replacement)

    def replace_all(self, old: str, new: str) -> Text:
        """Replace ``old`` repeatedly, searching again from the start after each change."""
        if not old:
            raise ValueError("the text to replace must not be empty")
        if old in new:
            raise ValueError("the replacement must not contain the text it replaces")
        position = self._value.find(old)
        while position >= 0:
            self._splice(position, len(old), new)
            position = self._value.find(old)
        return self

    def replace_first(self, old: str, new: str) -> Text:
        position = self._value.find(old)
        if position >= 0:
            self._splice(position, len(old), new)
        return self

    def replace_last(self, old: str, new: str) -> Text:
        position = self._value.rfind(old)
        if position >= 0:
            self._splice(position, len(old), new)
        return self

    # -- appending and inserting ------------------------------------------

    def append(self, value: str | Text) -> Text:
        self._value += str(value)
        return self

    def append_float(self, value: float, ndigit: int | None = None) -> Text:
        return self.append(textops.float_to_string(value, ndigit))

    def append_integer(self, value: int) -> Text:
        return self.append(str(int(value)))

    def append_character(self, char: str, count: int = 1) -> Text:
        return self.append(char * count)

    def append_format(self, fmt: str, *args: object) -> Text:
        return self.append(fmt % args)

    def insert(self, index: int, value: str | Text) -> Text:
        return self._splice(self._index(index), 0, str(value))

    def insert_float(self, index: int, value: float, ndigit: int | None = None) -> Text:
        return self.insert(index, textops.float_to_string(value, ndigit))

    def insert_integer(self, index: int, value: int) -> Text:
        return self.insert(index, str(int(value)))

    def insert_character(self, index: int, char: str, count: int = 1) -> Text:
        return self.insert(index, char * count)

    def insert_format(self, index: int, fmt: str, *args: object) -> Text:
        return self.insert(index, fmt % args)

    # -- erasing ----------------------------------------------------------

    def erase_from_to(self, start: int, end: int) -> Text:
        first, last = self._range(start, end)
        return self._splice(first, last - first + 1, "")

    def erase_from(self, start: int) -> Text:
        self._value = self._value[:self._index(start)]
        return self

    def erase_to(self, end: int) -> Text:
        return self._splice(0, self._index(end) + 1, "")

    def erase(self, index: int, count: int) -> Text:
        return self._splice(self._index(index), count, "")

    def erase_all(self, sub: str) -> Text:
        """Remove ``sub`` repeatedly, searching again from the start after each removal."""
        if not sub:
            raise ValueError("the text to erase must not be empty")
        position = self._value.find(sub)
        while position >= 0:
            self._splice(position, len(sub), "")
            position = self._value.find(sub)
        return self

    def erase_first(self, sub: str) -> Text:
        return self.replace_first(sub, "")

    def erase_last(self, sub: str) -> Text:
        return self.replace_last(sub, "")

    # -- padding and trimming ---------------------------------------------

    def left_pad(self, width: int, fillchar: str = " ") -> Text:
        self._value = textops.left_pad(self._value, width, fillchar)
        return self

    def right_pad(self, width: int, fillchar: str = " ") -> Text:
        self._value = textops.right_pad(self._value, width, fillchar)
        return self

    def trim_left(self, chars: str | None = None) -> Text:
        self._value = textops.trim_left(self._value, chars)
        return self

    def trim_right(self, chars: str | None = None) -> Text:
        self._value = textops.trim_right(self._value, chars)
        return self

    def trim(self, chars: str | None = None) -> Text:
        self._value = textops.trim(self._value, chars)
        return self

    # -- searching --------------------------------------------------------

    def _find(self, first: int, last: int, sub: str, icase: bool) -> int:
        haystack, needle = self._value, sub
        if icase:
            haystack, needle = _lower(haystack), _lower(needle)
        position = haystack.find(needle, first)
        if position < 0 or position + len(needle) - 1 > last:
            return NOT_FOUND
        return position

    def index_of_from_to(self, start: int, end: int, sub: str, icase: bool = False) -> int:
        """Find ``sub`` lying wholly inside ``[start, end]``; -1 when absent."""
        first, last = self._range(start, end)
        return self._find(first, last, sub, icase)

    def index_of_from(self, start: int, sub: str, icase: bool = False) -> int:
        return self._find(self._index(start), len(self._value) - 1, sub, icase)

    def index_of_to(self, end: int, sub: str, icase: bool = False) -> int:
        return self._find(0, self._index(end), sub, icase)

    def index_of(self, sub: str, icase: bool = False) -> int:
        return self._find(0, len(self._value) - 1, sub, icase)

    def reverse_index_of(self, sub: str, icase: bool = False) -> int:
        if icase:
            return _lower(self._value).rfind(_lower(sub))
        return self._value.rfind(sub)

    # -- splitting --------------------------------------------------------

    def split_by_character(self, delimiter: str) -> list[str]:
        return textops.split_by_character(self._value, delimiter)

    def split_by_string(self, delimiter: str) -> list[str]:
        return textops.split_by_string(self._value, delimiter)

    def split_by_character_set(self, delimiters: str) -> list[str]:
        return textops.split_by_character_set(self._value, delimiters)

    # -- predicates -------------------------------------------------------

    def is_equal(self, other: str | Text, icase: bool = False) -> bool:
        other_value = str(other)
        if icase:
            return _lower(self._value) == _lower(other_value)
        return self._value == other_value

    def is_empty(self) -> bool:
        """True when the text is empty or holds only whitespace."""
        return self.is_space()

    def _all_in(self, allowed: frozenset[str]) -> bool:
        return all(char in allowed for char in self._value)

    def is_upper(self) -> bool:
        return self._all_in(_UPPER)

    def is_lower(self) -> bool:
        return self._all_in(_LOWER)

    def is_alpha(self) -> bool:
        return self._all_in(_ALPHA)

    def is_digit(self) -> bool:
        return self._all_in(_DIGIT)

    def is_space(self) -> bool:
        return self._all_in(_SPACE)

    def has_prefix(self, prefix: str) -> bool:
        return self._value.startswith(prefix)

    def has_suffix(self, suffix: str) -> bool:
        return self._value.endswith(suffix)

    def common_prefix(self, other: str, icase: bool = False) -> str:
        return textops.common_prefix(self._value, str(other), icase)

    def common_suffix(self, other: str, icase: bool = False) -> str:
        return textops.common_suffix(self._value, str(other), icase)

    # -- transformations --------------------------------------------------

    def reverse(self) -> Text:
        self._value = self._value[::-1]
        return self

    def repeat(self, count: int) -> Text:
        self._value = self._value * max(count, 0)
        return self

    def capitalized(self) -> Text:
        """Upper-case the first character and leave the rest alone."""
        if self._value:
            self._value = self._value[0].translate(_TO_UPPER) + self._value[1:]
        return self

    def to_lower(self) -> Text:
        self._value = self._value.translate(_TO_LOWER)
        return self

    def to_upper(self) -> Text:
        self._value = self._value.translate(_TO_UPPER)
        return self

    # -- conversions ------------------------------------------------------

    def to_int(self) -> int:
        return textops.to_int(self._value)

    def to_float(self) -> float:
        return textops.to_float(self._value)

    def to_bool(self) -> bool:
        return textops.to_bool(self._value)