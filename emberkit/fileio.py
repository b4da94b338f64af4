"""Binary file access and small file-system helpers."""

from __future__ import annotations

import enum
import os
import shutil
import stat
import sys
import tempfile
from typing import BinaryIO

from emberkit.data import Data
from emberkit.path import SEPARATOR, Path

_COPY_BUFFER_SIZE = 4096


class Location(enum.IntEnum):
    """Reference point for :meth:`File.seek`."""

    SET = os.SEEK_SET
    CUR = os.SEEK_CUR
    END = os.SEEK_END


class WriteMode(enum.Enum):
    """How :func:`write_bytes` treats an existing file."""

    CREATE_OR_OVERWRITE = "wb"
    CREATE_OR_APPEND = "ab"


def _as_bytes(content: Data | bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8", "surrogateescape")
    return bytes(content)


def _binary_mode(mode: str) -> str:
    mode = mode.replace("t", "")
    return mode if "b" in mode else mode + "b"


class File:
    """A binary file handle; usable as a context manager that closes it."""

    def __init__(self) -> None:
        self._stream: BinaryIO | None = None
        self._path = ""
        self._eof = False

    def __enter__(self) -> File:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def path(self) -> str:
        """The path the file was opened with; empty for a temporary file."""
        return self._path

    def _require(self) -> BinaryIO:
        if self._stream is None:
            raise ValueError("file is not open")
        return self._stream

    def open(self, path: str | os.PathLike[str], mode: str = "rb") -> File:
        """Open ``path`` with an fopen-style mode; the handle must not be open already."""
        if self._stream is not None:
            raise ValueError("file is already open")
        path = os.fspath(path)
        if not path:
            raise ValueError("path must not be empty")
        if not mode:
            raise ValueError("mode must not be empty")
        self._stream = open(path, _binary_mode(mode))
        self._path = path
        self._eof = False
        return self

    def open_temp(self) -> File:
        """Close any open file and open an anonymous temporary one for reading and writing."""
        self.close()
        self._stream = tempfile.TemporaryFile("w+b")
        self._path = ""
        self._eof = False
        return self

    def close(self) -> None:
        """Close the file; closing a closed handle does nothing."""
        if self._stream is None:
            return
        self._stream.close()
        self._stream = None
        self._path = ""
        self._eof = False

    def flush(self) -> None:
        self._require().flush()

    def is_open(self) -> bool:
        return self._stream is not None

    def is_eof(self) -> bool:
        """True once a read hit the end of the file, or when the file is closed."""
        return self._stream is None or self._eof

    def size(self) -> int:
        """Size of the file in bytes without moving the position; 0 when closed."""
        if self._stream is None:
            return 0
        position = self.tell()
        end = self._stream.seek(0, os.SEEK_END)
        self.seek(position)
        return end

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the current position."""
        if size < 0:
            raise ValueError("size must not be negative")
        chunk = self._require().read(size)
        if len(chunk) < size:
            self._eof = True
        return chunk

    def write(self, content: Data | bytes | bytearray | memoryview | str) -> int:
        """Write content at the current position and return the number of bytes written."""
        return self._require().write(_as_bytes(content))

    def tell(self) -> int:
        return self._require().tell()

    def seek(self, offset: int = 0, where: Location = Location.SET) -> int:
        """Move the position and return the new one."""
        position = self._require().seek(offset, int(where))
        self._eof = False
        return position

    def resize(self, size: int) -> None:
        """Truncate or extend the file to ``size`` bytes; it must be open for writing."""
        if size < 0:
            raise ValueError("size must not be negative")
        stream = self._require()
        stream.flush()
        os.ftruncate(stream.fileno(), size)

    def fileno(self) -> int:
        return self._require().fileno()

    def get_bytes(self, length: int = 0) -> Data:
        """Read ``length`` bytes (0: the rest) from the current position, leaving it unchanged."""
        if length < 0:
            raise ValueError("length must not be negative")
        position = self.tell()
        if length == 0:
            length = max(self.size() - position, 0)
        content = self._require().read(length)
        self.seek(position)
        return Data(content)

    def get_string(self, length: int = 0) -> str:
        """Like :meth:`get_bytes`, returning text."""
        return self.get_bytes(length).to_string()

    def dump_hex(self, length: int = 0) -> None:
        """Print content as upper-case hex, a space after every two bytes."""
        content = bytes(self.get_bytes(length))
        out = []
        for count, byte in enumerate(content, start=1):
            out.append("%02X" % byte)
            if count % 2 == 0:
                out.append(" ")
        sys.stdout.write("".join(out) + "\n")

    def dump_binary(self, length: int = 0) -> None:
        """Print content as eight binary digits and a space per byte."""
        content = bytes(self.get_bytes(length))
        sys.stdout.write("".join(f"{byte:08b} " for byte in content) + "\n")


def read_bytes(path: str | os.PathLike[str], length: int = 0) -> Data:
    """Read ``length`` bytes (0: all) from the start of a file."""
    with File().open(path, "rb") as handle:
        return handle.get_bytes(length)


def write_bytes(
    path: str | os.PathLike[str],
    content: Data | bytes | bytearray | memoryview | str,
    mode: WriteMode = WriteMode.CREATE_OR_OVERWRITE,
) -> int:
    """Write content to a file, overwriting or appending; returns the bytes written."""
    payload = _as_bytes(content)
    with File().open(path, mode.value) as handle:
        written = handle.write(payload)
    if written != len(payload):
        raise OSError(f"short write to {os.fspath(path)!r}")
    return written


def last_modify_time(path: str | os.PathLike[str]) -> int:
    """Modification time of the path itself (links not followed), in whole seconds."""
    return int(os.lstat(path).st_mtime)


def _lstat_mode(path: str | os.PathLike[str]) -> int | None:
    try:
        return os.lstat(path).st_mode
    except OSError:
        return None


def is_dir(path: str | os.PathLike[str]) -> bool:
    mode = _lstat_mode(path)
    return mode is not None and stat.S_ISDIR(mode)


def is_file(path: str | os.PathLike[str]) -> bool:
    mode = _lstat_mode(path)
    return mode is not None and stat.S_ISREG(mode)


def is_link(path: str | os.PathLike[str]) -> bool:
    mode = _lstat_mode(path)
    return mode is not None and stat.S_ISLNK(mode)


def path_exists(path: str | os.PathLike[str]) -> bool:
    return os.path.exists(path)


def make_file(path: str | os.PathLike[str]) -> None:
    """Create an empty file; raises FileExistsError if the path exists."""
    if path_exists(path):
        raise FileExistsError(f"{os.fspath(path)!r} already exists")
    with open(path, "xb"):
        pass


def make_directory(path: str | os.PathLike[str]) -> None:
    """Create one directory; its parent must exist."""
    os.mkdir(path, 0o775)


def make_deep_directory(path: str | os.PathLike[str]) -> None:
    """Create a directory together with any missing parents."""
    raw = os.fspath(path)
    current = SEPARATOR if raw.startswith(SEPARATOR) else ""
    for component in Path(raw).normalize().split():
        if not component:
            continue
        current += component + SEPARATOR
        if not path_exists(current):
            make_directory(current)


def remove(path: str | os.PathLike[str]) -> None:
    """Remove a file, a link or an empty directory."""
    if is_dir(path):
        os.rmdir(path)
    else:
        os.remove(path)


def rename(path: str | os.PathLike[str], newname: str) -> None:
    """Give the file a new name within the same directory."""
    raw = os.fspath(path)
    directory = Path(raw).directory() if SEPARATOR in raw else ""
    move(raw, directory + newname)


def move(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
    os.rename(src, dst)


def copy(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
    """Copy the content of ``src`` into ``dst``, creating or overwriting it."""
    with open(src, "rb") as source, open(dst, "wb") as target:
        shutil.copyfileobj(source, target, _COPY_BUFFER_SIZE)