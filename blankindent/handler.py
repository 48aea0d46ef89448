import os
import shutil
from contextlib import suppress
from typing import Any, Callable, Optional

from blankindent.config import Config
from blankindent.errors import FileTooBigError, ReplaceError
from blankindent.reindenter import reindent
from blankindent.scanner import read_lines
from blankindent.writer import render_lines, write_lines

TEMP_SUFFIX = ".indent"


def reindent_bytes(data: bytes, tab_width: int, log: Optional[Callable[[Any], None]] = None) -> bytes:
    lines = read_lines(data, tab_width, log=log)
    reindent(lines)
    return render_lines(lines)


def handle_file(path: str, config: Config, log: Optional[Callable[[Any], None]] = None) -> str:
    """
    Reindent the blank lines of one file.

    Output goes to `<path>.indent` first. Outside debug mode that file is
    then moved over the original. Returns the path holding the result.
    """
    # prevent big files
    size = os.stat(path).st_size
    if size > config.max_size:
        raise FileTooBigError(path=path, size=size, limit=config.max_size)

    with open(path, "rb") as f:
        data = f.read()

    temp_path = path + TEMP_SUFFIX

    out = open(temp_path, "wb")
    try:
        with out:
            lines = read_lines(data, config.tab_width, log=log)
            reindent(lines)
            write_lines(lines, out)
    except OSError:
        # best effort, the write error is what gets reported
        with suppress(OSError):
            os.remove(temp_path)
        raise

    # when debugging, don't overwrite
    if config.debug:
        return temp_path

    try:
        shutil.copymode(path, temp_path)
        os.replace(temp_path, path)
    except OSError as e:
        # temp file is left behind
        raise ReplaceError(path=path, temp_path=temp_path, cause=e)

    return path
