import os

import pytest

from emberkit import fileio
from emberkit.data import Data
from emberkit.fileio import File, Location, WriteMode


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(b"hello world")
    return path


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "out.bin"
    with File().open(path, "wb") as handle:
        assert handle.write(b"abc") == 3
        assert handle.write(Data(b"def")) == 3
    with File().open(path, "rb") as handle:
        assert handle.read(6) == b"abcdef"
        assert handle.path == str(path)


def test_open_twice_raises(sample):
    handle = File().open(sample)
    with pytest.raises(ValueError):
        handle.open(sample)
    handle.close()
    assert not handle.is_open()


def test_open_empty_path_or_mode_raises(sample):
    with pytest.raises(ValueError):
        File().open("", "rb")
    with pytest.raises(ValueError):
        File().open(sample, "")


def test_open_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        File().open(tmp_path / "missing", "rb")


def test_operations_on_closed_file_raise():
    handle = File()
    with pytest.raises(ValueError):
        handle.read(1)
    with pytest.raises(ValueError):
        handle.tell()
    assert handle.size() == 0
    assert handle.is_eof() is True


def test_eof_set_by_short_read_and_cleared_by_seek(sample):
    with File().open(sample) as handle:
        assert handle.is_eof() is False
        content = handle.read(100)
        assert content == b"hello world"
        assert handle.is_eof() is True
        handle.seek(0)
        assert handle.is_eof() is False


def test_size_keeps_position(sample):
    with File().open(sample) as handle:
        handle.seek(4)
        assert handle.size() == len(b"hello world")
        assert handle.tell() == 4


def test_seek_locations(sample):
    with File().open(sample) as handle:
        assert handle.seek(-5, Location.END) == 6
        assert handle.read(5) == b"world"
        handle.seek(0)
        handle.seek(2, Location.CUR)
        assert handle.tell() == 2


def test_get_bytes_leaves_position(sample):
    with File().open(sample) as handle:
        handle.seek(6)
        assert handle.get_bytes() == Data(b"world")
        assert handle.tell() == 6
        assert handle.get_string(3) == "wor"
        assert handle.tell() == 6


def test_resize_truncates_and_grows(tmp_path):
    path = tmp_path / "r.bin"
    with File().open(path, "w+b") as handle:
        handle.write(b"abcdef")
        handle.resize(3)
        assert handle.size() == 3
        handle.resize(5)
        handle.seek(0)
        assert handle.read(5) == b"abc\x00\x00"


def test_open_temp_round_trip():
    with File().open_temp() as handle:
        assert handle.path == ""
        handle.write("text")
        handle.seek(0)
        assert handle.get_string() == "text"


def test_context_manager_closes(sample):
    with File().open(sample) as handle:
        assert handle.is_open()
    assert not handle.is_open()


def test_fileno_matches_size(sample):
    with File().open(sample) as handle:
        assert os.fstat(handle.fileno()).st_size == handle.size()


def test_dump_hex(tmp_path, capsys):
    path = tmp_path / "h.bin"
    path.write_bytes(b"\x01\xab\xff")
    with File().open(path) as handle:
        handle.dump_hex()
    assert capsys.readouterr().out == "01AB FF\n"


def test_dump_binary(tmp_path, capsys):
    path = tmp_path / "b.bin"
    path.write_bytes(b"\x05")
    with File().open(path) as handle:
        handle.dump_binary()
    assert capsys.readouterr().out == "00000101 \n"


def test_write_bytes_overwrite_and_append(tmp_path):
    path = tmp_path / "w.bin"
    fileio.write_bytes(path, b"one")
    fileio.write_bytes(path, b"two")
    assert path.read_bytes() == b"two"
    fileio.write_bytes(path, Data(b"three"), WriteMode.CREATE_OR_APPEND)
    assert path.read_bytes() == b"twothree"


def test_read_bytes(sample):
    assert fileio.read_bytes(sample) == Data(b"hello world")
    assert fileio.read_bytes(sample, 5) == Data(b"hello")


def test_read_bytes_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileio.read_bytes(tmp_path / "nope")


def test_kind_predicates(tmp_path, sample):
    link = tmp_path / "link"
    os.symlink(sample, link)
    assert fileio.is_file(sample) and not fileio.is_dir(sample)
    assert fileio.is_dir(tmp_path) and not fileio.is_file(tmp_path)
    assert fileio.is_link(link) and not fileio.is_file(link)
    assert not fileio.is_file(tmp_path / "missing")
    assert fileio.path_exists(sample)
    assert not fileio.path_exists(tmp_path / "missing")


def test_last_modify_time(sample):
    assert fileio.last_modify_time(sample) == int(os.lstat(sample).st_mtime)
    with pytest.raises(FileNotFoundError):
        fileio.last_modify_time(str(sample) + ".missing")


def test_make_file(tmp_path):
    path = tmp_path / "new.txt"
    fileio.make_file(path)
    assert path.read_bytes() == b""
    with pytest.raises(FileExistsError):
        fileio.make_file(path)


def test_make_directory_needs_parent(tmp_path):
    fileio.make_directory(tmp_path / "d")
    assert fileio.is_dir(tmp_path / "d")
    with pytest.raises(FileNotFoundError):
        fileio.make_directory(tmp_path / "x" / "y")


def test_make_deep_directory(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    fileio.make_deep_directory(str(target))
    assert fileio.is_dir(target)
    fileio.make_deep_directory(str(target) + "/")
    assert fileio.is_dir(target)


def test_remove_file_and_empty_directory(tmp_path, sample):
    fileio.remove(sample)
    assert not fileio.path_exists(sample)
    empty = tmp_path / "empty"
    empty.mkdir()
    fileio.remove(empty)
    assert not fileio.path_exists(empty)


def test_rename_and_move(tmp_path, sample):
    fileio.rename(str(sample), "renamed.bin")
    renamed = tmp_path / "renamed.bin"
    assert renamed.read_bytes() == b"hello world"
    assert not sample.exists()
    target = tmp_path / "moved.bin"
    fileio.move(renamed, target)
    assert target.read_bytes() == b"hello world"


def test_copy(tmp_path):
    src = tmp_path / "src.bin"
    payload = bytes(range(256)) * 40
    src.write_bytes(payload)
    dst = tmp_path / "dst.bin"
    fileio.copy(src, dst)
    assert dst.read_bytes() == payload
    with pytest.raises(FileNotFoundError):
        fileio.copy(tmp_path / "missing", dst)