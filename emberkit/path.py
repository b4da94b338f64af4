"""String-based path manipulation.

A path ending in the separator names a directory, any other names a file;
a path starting with the separator is absolute.
"""

from __future__ import annotations

import os
import tempfile
import uuid

from emberkit import textops

SEPARATOR = "/"
PARENT = ".."
CURRENT = "."


class Path:
    """A mutable path; editing methods change it in place and return it for chaining.

    Component indices count only non-empty components ("a//b" has two) and
    accept negative values, -1 being the last component.
    """

    def __init__(self, path: str | Path = "") -> None:
        self._path = str(path)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Path({self._path!r})"

    def __fspath__(self) -> str:
        return self._path

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._path == other._path
        if isinstance(other, str):
            return self._path == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def _locate(self, index: int) -> tuple[list[str], int | None]:
        """Split the path and map a component index to a position in the split."""
        components = self.split()
        slots = [position for position, item in enumerate(components) if item]
        if index < 0:
            index += len(slots)
        if 0 <= index < len(slots):
            return components, slots[index]
        return components, None

    def is_absolute(self) -> bool:
        return self._path.startswith(SEPARATOR)

    def extension(self) -> str:
        """Text after the last dot of the filename, or "" when there is none."""
        name = self.filename()
        position = name.rfind(".")
        if position < 0 or position >= len(name) - 1:
            return ""
        return name[position + 1:]

    def filename(self) -> str:
        """Text after the last separator; "" when the path has no separator."""
        position = self._path.rfind(SEPARATOR)
        if position < 0:
            return ""
        return self._path[position + 1:]

    def directory(self) -> str:
        """The path without its filename, or the whole path when there is none."""
        name = self.filename()
        if not name:
            return self._path
        return self._path[: len(self._path) - len(name)]

    def component(self, index: int) -> str:
        """Return a non-empty component, or "" when the index is out of range."""
        components, position = self._locate(index)
        return "" if position is None else components[position]

    def last_component(self) -> str:
        return self.component(-1)

    def append(self, component: str) -> Path:
        """Add a component, keeping exactly one separator at the joint."""
        tail = component.lstrip(SEPARATOR)
        if not self._path:
            self._path = tail
        elif self._path.endswith(SEPARATOR):
            self._path += tail
        else:
            self._path += SEPARATOR + tail
        return self

    def remove_component(self, index: int) -> Path:
        """Drop a component; a trailing last one leaves its separator behind."""
        components, position = self._locate(index)
        if not components:
            return self
        if position is not None:
            if position == len(components) - 1:
                components[position] = ""
            else:
                del components[position]
        self._path = str(Path.join(components))
        return self

    def remove_last_component(self, count: int = 1) -> Path:
        for _ in range(count):
            self.remove_component(-1)
        return self

    def change_component(self, index: int, component: str) -> Path:
        components, position = self._locate(index)
        if not components:
            return self
        if position is not None:
            components[position] = component
        self._path = str(Path.join(components))
        return self

    def change_last_component(self, component: str) -> Path:
        return self.change_component(-1, component)

    def change_filename(self, filename: str) -> Path:
        """Replace the filename; a path without one is left unchanged."""
        if self.filename():
            self.change_component(-1, filename)
        return self

    def change_extension(self, extension: str) -> Path:
        """Replace the extension (with or without a leading dot) if there is one."""
        old_extension = self.extension()
        old_name = self.filename()
        if old_extension and old_name:
            stem = old_name[: len(old_name) - len(old_extension)]
            cleaned = textops.trim_left(textops.trim(extension), CURRENT)
            self.change_component(-1, stem + cleaned)
        return self

    def normalize(self) -> Path:
        """Collapse repeated separators and resolve "." and ".." components."""
        if not self._path:
            return self
        absolute = self._path.startswith(SEPARATOR)
        is_dir = self._path.endswith(SEPARATOR)
        kept: list[str] = []
        for item in self.split():
            if not item or item == CURRENT:
                continue
            if item == PARENT:
                if kept:
                    kept.pop()
                continue
            kept.append(item)
        result = textops.trim(SEPARATOR.join(kept), SEPARATOR)
        if is_dir and result:
            result += SEPARATOR
        if absolute:
            result = SEPARATOR + result
        self._path = result
        return self

    def split(self) -> list[str]:
        """Split on the separator, keeping empty components so join restores the path."""
        return textops.split_by_character(self._path, SEPARATOR)

    @staticmethod
    def join(components: list[str]) -> Path:
        """Join components with a separator between each pair."""
        return Path(textops.concat(components, SEPARATOR))


def join_path(path: str | Path, component: str) -> Path:
    """Return a new path with ``component`` appended."""
    return Path(path).append(component)


def home_dir() -> str:
    """The user's home directory from the HOME environment variable."""
    home = os.environ.get("HOME")
    if home is None:
        raise KeyError("HOME is not set")
    return home


def temp_path() -> str:
    """A fresh, not yet existing file path in the temporary directory."""
    directory = tempfile.gettempdir()
    while True:
        candidate = os.path.join(directory, "tmp" + uuid.uuid4().hex[:12])
        if not os.path.exists(candidate):
            return candidate