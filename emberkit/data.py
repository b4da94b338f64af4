"""A growable byte buffer with editing and searching methods."""

from __future__ import annotations

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

NOT_FOUND = -1

Content = "Data | bytes | bytearray | memoryview | str | int"


def _byte(value: int | str | bytes) -> int:
    """Turn a byte given as an int, a one-byte bytes or a one-character str into an int."""
    if isinstance(value, bool):
        raise TypeError("a byte cannot be a bool")
    if isinstance(value, int):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value {value} out of range 0..255")
        return value
    if isinstance(value, str):
        value = value.encode(_ENCODING, _ERRORS)
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError("a byte must be exactly one byte long")
        return value[0]
    raise TypeError(f"cannot use {type(value).__name__} as a byte")


def _piece(content: object) -> bytes:
    """Turn content to insert into bytes; an int is a single byte."""
    if isinstance(content, Data):
        return bytes(content)
    if isinstance(content, str):
        return content.encode(_ENCODING, _ERRORS)
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    if isinstance(content, int) and not isinstance(content, bool):
        return bytes([_byte(content)])
    raise TypeError(f"cannot use {type(content).__name__} as data")


class Data:
    """A byte buffer that may also be null, which is distinct from empty.

    Editing methods change the buffer in place and return it for chaining.
    Index arguments accept negative values counting from the end (-1 is the
    last byte). Insert, replace and erase with an index outside the buffer
    leave it unchanged.
    """

    NOT_FOUND = NOT_FOUND

    def __init__(self, content: object = None) -> None:
        self._buffer: bytearray | None
        if content is None:
            self._buffer = None
        elif isinstance(content, Data):
            self._buffer = None if content._buffer is None else bytearray(content._buffer)
        elif isinstance(content, bool):
            raise TypeError("cannot build Data from a bool")
        elif isinstance(content, int):
            if content < 0:
                raise ValueError("size must not be negative")
            self._buffer = bytearray(content)
        elif isinstance(content, str):
            self._buffer = bytearray(content.encode(_ENCODING, _ERRORS))
        elif isinstance(content, (bytes, bytearray, memoryview)):
            self._buffer = bytearray(content)
        else:
            raise TypeError(f"cannot build Data from {type(content).__name__}")

    def __len__(self) -> int:
        return 0 if self._buffer is None else len(self._buffer)

    def __bytes__(self) -> bytes:
        return b"" if self._buffer is None else bytes(self._buffer)

    def __repr__(self) -> str:
        if self._buffer is None:
            return "Data(None)"
        return f"Data({bytes(self._buffer)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Data):
            return NotImplemented
        if self._buffer is None or other._buffer is None:
            return self._buffer is None and other._buffer is None
        return self._buffer == other._buffer

    __hash__ = None  # type: ignore[assignment]

    def is_null(self) -> bool:
        """True when no buffer is held at all (an empty buffer is not null)."""
        return self._buffer is None

    def clear(self) -> Data:
        """Release the buffer, making the data null."""
        self._buffer = None
        return self

    def resize(self, size: int, fillchar: int | str | bytes = 0) -> Data:
        """Truncate to ``size`` bytes, or grow filling the new bytes with ``fillchar``."""
        if size < 0:
            raise ValueError("size must not be negative")
        fill = _byte(fillchar)
        buffer = self._buffer if self._buffer is not None else bytearray()
        if size > len(buffer):
            buffer.extend(bytes([fill]) * (size - len(buffer)))
        else:
            del buffer[size:]
        self._buffer = buffer
        return self

    def fill(self, value: int | str | bytes = 0, index: int = 0, size: int | None = None) -> Data:
        """Set ``size`` bytes from ``index`` to ``value``, growing the buffer if needed.

        Without ``size`` everything from ``index`` to the end is filled.
        """
        byte = _byte(value)
        if index < 0:
            raise IndexError("index must not be negative")
        current = len(self)
        if size is None:
            size = max(current - index, 0)
        if size < 0:
            raise ValueError("size must not be negative")
        if self._buffer is None and size == 0:
            return self
        buffer = self._buffer if self._buffer is not None else bytearray()
        end = index + size
        if len(buffer) < end:
            buffer.extend(bytes(end - len(buffer)))
        buffer[index:end] = bytes([byte]) * size
        self._buffer = buffer
        return self

    def insert(self, index: int, content: object) -> Data:
        """Insert content before ``index``; -1 inserts before the last byte."""
        piece = _piece(content)
        size = len(self)
        position = size + index if index < 0 else index
        if not 0 <= position <= size:
            return self
        buffer = self._buffer if self._buffer is not None else bytearray()
        buffer[position:position] = piece
        self._buffer = buffer
        return self

    def append(self, content: object) -> Data:
        """Add content at the end."""
        return self.insert(len(self), content)

    def replace(self, index: int, count: int, content: object) -> Data:
        """Replace up to ``count`` bytes from ``index`` with content."""
        piece = _piece(content)
        if count < 0:
            raise ValueError("count must not be negative")
        size = len(self)
        position = size + index if index < 0 else index
        if not 0 <= position < size:
            return self
        replaced = min(count, size - position)
        if replaced <= 0:
            return self
        assert self._buffer is not None
        self._buffer[position:position + replaced] = piece
        return self

    def erase(self, index: int, count: int) -> Data:
        """Remove up to ``count`` bytes from ``index``; the part past the end is ignored."""
        if count < 0:
            raise ValueError("count must not be negative")
        size = len(self)
        position = size + index if index < 0 else index
        if not 0 <= position < size:
            return self
        removed = min(count, size - position)
        if removed <= 0:
            return self
        assert self._buffer is not None
        del self._buffer[position:position + removed]
        return self

    def _position(self, index: int) -> int:
        size = len(self)
        position = size + index if index < 0 else index
        if not 0 <= position < size:
            raise IndexError(f"index {index} out of range for length {size}")
        return position

    def index_of(self, value: int | str | bytes, start: int = 0) -> int:
        """First position of a byte at or after ``start``; -1 when absent."""
        byte = _byte(value)
        position = self._position(start)
        assert self._buffer is not None
        return self._buffer.find(byte, position)

    def last_index_of(self, value: int | str | bytes, start: int = -1) -> int:
        """Last position of a byte at or before ``start``; -1 when absent."""
        byte = _byte(value)
        position = self._position(start)
        assert self._buffer is not None
        return self._buffer.rfind(byte, 0, position + 1)

    def byte_at(self, index: int) -> int:
        """The byte at ``index`` as an int."""
        position = self._position(index)
        assert self._buffer is not None
        return self._buffer[position]

    def to_string(self) -> str:
        """The bytes as text; undecodable bytes survive a round trip through Data(text)."""
        if self._buffer is None:
            return ""
        return bytes(self._buffer).decode(_ENCODING, _ERRORS)