import os
import stat

import pytest

from blankindent.config import Config
from blankindent.errors import FileTooBigError, ReplaceError
from blankindent.handler import handle_file, reindent_bytes

from conftest import FIXTURES_DIR, read_bytes

MIXED = b"class A:\n\tdef f(self):\n\t\treturn 1\n \n\n\tdef g(self):\n      \n\t\tpass\n"


@pytest.mark.parametrize("name", ["t1", "t2"])
def test_fixtures_match_in_debug_mode(fixture_copy, name):
    path = fixture_copy(name)
    original = read_bytes(path)

    result = handle_file(path, Config(debug=True))

    assert result == path + ".indent"
    assert read_bytes(path + ".indent") == read_bytes(os.path.join(FIXTURES_DIR, name + ".result"))
    assert read_bytes(path) == original


def test_missing_file_raises_and_leaves_nothing(tmp_path):
    path = str(tmp_path / "missing")
    with pytest.raises(FileNotFoundError):
        handle_file(path, Config())
    assert not os.path.exists(path + ".indent")


def test_too_big_file_is_refused(tmp_path):
    path = tmp_path / "big"
    path.write_bytes(b"0123456789\n")
    with pytest.raises(FileTooBigError) as exc_info:
        handle_file(str(path), Config(max_size=10))
    assert exc_info.value.size == 11
    assert str(exc_info.value) == "file too big (11 > 10 bytes)"
    assert not os.path.exists(str(path) + ".indent")


def test_file_at_size_limit_is_accepted(tmp_path):
    path = tmp_path / "edge"
    path.write_bytes(b"0123456789")
    handle_file(str(path), Config(max_size=10))
    assert path.read_bytes() == b"0123456789\r\n"


def test_rewrites_in_place(tmp_path):
    path = tmp_path / "src.py"
    path.write_bytes(b"a\n    \n  b\n")
    os.chmod(path, 0o640)

    assert handle_file(str(path), Config()) == str(path)

    assert path.read_bytes() == b"a\r\n  \r\n  b\r\n"
    assert not os.path.exists(str(path) + ".indent")
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o640


def test_no_blank_lines_keeps_indentation(tmp_path):
    path = tmp_path / "plain"
    path.write_bytes(b"x  \n\ty\t\n    z\r\n")
    handle_file(str(path), Config(tab_width=4))
    assert path.read_bytes() == b"x\r\n    y\r\n    z\r\n"


def test_idempotent_on_mixed_indentation(tmp_path):
    path = tmp_path / "mixed.py"
    path.write_bytes(MIXED)

    handle_file(str(path), Config(tab_width=4))
    once = path.read_bytes()
    handle_file(str(path), Config(tab_width=4))

    assert path.read_bytes() == once
    assert once == b"class A:\r\n    def f(self):\r\n        return 1\r\n    \r\n    \r\n    def g(self):\r\n    \r\n        pass\r\n"


def test_reindent_bytes_matches_fixture():
    data = read_bytes(os.path.join(FIXTURES_DIR, "t2"))
    assert reindent_bytes(data, 2) == read_bytes(os.path.join(FIXTURES_DIR, "t2.result"))


def test_write_failure_removes_temp_file(tmp_path, monkeypatch):
    path = tmp_path / "src"
    path.write_bytes(b"a\n \nb\n")

    def broken_write(lines, out):
        out.write(b"partial")
        raise OSError("disk full")

    monkeypatch.setattr("blankindent.handler.write_lines", broken_write)

    with pytest.raises(OSError, match="disk full"):
        handle_file(str(path), Config())
    assert not os.path.exists(str(path) + ".indent")
    assert path.read_bytes() == b"a\n \nb\n"


def test_replace_failure_keeps_temp_file(tmp_path, monkeypatch):
    path = tmp_path / "src"
    path.write_bytes(b"a\n \nb\n")

    def broken_replace(src, dst):
        raise PermissionError("read-only directory")

    monkeypatch.setattr("blankindent.handler.os.replace", broken_replace)

    with pytest.raises(ReplaceError) as exc_info:
        handle_file(str(path), Config())
    assert exc_info.value.temp_path == str(path) + ".indent"
    assert isinstance(exc_info.value.cause, PermissionError)
    assert read_bytes(str(path) + ".indent") == b"a\r\n\r\nb\r\n"
    assert path.read_bytes() == b"a\n \nb\n"
