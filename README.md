# emberkit

A small toolkit of everyday helpers, with no dependencies beyond the standard library.

- `emberkit.textops`: functions that split, join, trim, pad and convert strings (`split_by_character`, `split_by_string`, `split_by_character_set`, `concat`, `common_prefix`, `common_suffix`, `left_pad`, `right_pad`, `trim_left`, `trim_right`, `trim`, `to_int`, `to_float`, `to_bool`, `bool_to_string`, `float_to_string`, `list_to_string`).
- `emberkit.strings`: `Text`, a mutable string. Its editing methods change the value in place and return the same object, so calls can be chained. Indexes may be negative, and `start`/`end` ranges include both ends. An index out of range raises `IndexError`. A search that finds nothing returns `-1`.
- `emberkit.path`: `Path`, a path held as a plain string with `/` as the separator. It can edit components and normalise `.` and `..`. The module also has `join_path`, `home_dir` and `temp_path`.
- `emberkit.arguments`: `Arguments`, `Commander` and `Option`, a light command-line parser with options and mutually exclusive subcommands. It also has `require_args_at_least` and `callback_fail`.
- `emberkit.data`: `Data`, a growable byte buffer. A null buffer is not the same as an empty one.
- `emberkit.fileio`: `File`, a binary file handle that works as a context manager. The module also has file-system helpers: `read_bytes`, `write_bytes`, `is_dir`, `is_file`, `is_link`, `path_exists`, `make_file`, `make_directory`, `make_deep_directory`, `remove`, `rename`, `move`, `copy` and `last_modify_time`.
- `emberkit.util`: `dump`, `dump_bool` and `dump_raw` for printing, plus conversions of byte sizes (`byte_to_kb`, `byte_to_mb`, `byte_to_gb`, `byte_to_human_readable`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from emberkit.strings import Text
from emberkit.textops import split_by_character, concat

t = Text("hello world")
t.replace_all("o", "0").to_upper()
print(str(t))                       # HELL0 W0RLD

parts = split_by_character("a/b//c", "/")
print(parts)                        # ['a', 'b', '', 'c']
print(concat(parts, "/"))           # a/b//c
```

```python
from emberkit.path import Path

p = Path("/root/path/../a/./file.txt")
p.normalize()
print(str(p))                       # /root/a/file.txt
print(p.extension())                # txt
```

### Command-line arguments

A `require` value fixes the number of arguments when it is `0` or more. A negative value gives a minimum instead: `require_args_at_least(n)` returns the value that means "at least `n`". Callbacks receive the command and its arguments. They return a true value to carry on.

```python
from emberkit.arguments import Arguments, require_args_at_least

def build(command, args):
    print("building", args, command.option_args("-o"))
    return True

app = Arguments(0, "demo tool", None)
app.subcommand("build", require_args_at_least(1), "build targets", build).option(
    "-o", 1, "output directory", None
)
app.parse(["demo", "build", "x", "y", "-o", "out"])
# building ['x', 'y'] ['out']
```

`parse` takes the whole command line with the program name first. Without an argument it reads `sys.argv`. It returns `True` on success. If the arguments do not fit, or a callback rejects them, it prints the help text for the chosen command and returns `False`. `Commander.execute` raises `ArgumentsError` in that case instead.

### Bytes and files

```python
from emberkit.data import Data
from emberkit.util import byte_to_human_readable

d = Data(b"abc")
d.append(b"def").insert(0, b"_")
print(bytes(d))                     # b'_abcdef'
print(byte_to_human_readable(2048)) # 2.00K
```

```python
from emberkit.fileio import File, read_bytes, write_bytes, WriteMode

write_bytes("notes.bin", b"hello")
write_bytes("notes.bin", b" world", WriteMode.CREATE_OR_APPEND)
print(read_bytes("notes.bin").to_string())   # hello world

with File().open("notes.bin", "rb") as f:
    print(f.size())                          # 11
    f.dump_hex(4)                            # 6865 6C6C
```

Operations on a closed `File` raise `ValueError`. Errors from the file system come through as the usual `OSError` subclasses.

## What it does not do

emberkit is a library only. It installs no command of its own. `Path` treats `/` as the only separator and does no Windows-style path handling. The file helpers use POSIX calls such as `os.ftruncate` and `os.lstat`.