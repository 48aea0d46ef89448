import io
from typing import BinaryIO, Iterable

from blankindent.scanner import LineRecord

CRLF = b"\r\n"


def write_lines(lines: Iterable[LineRecord], out: BinaryIO) -> None:
    """Write records as indent spaces + body + CRLF, flushing once at the end."""
    for item in lines:
        out.write(b" " * item.indent + item.body + CRLF)
    out.flush()


def render_lines(lines: Iterable[LineRecord]) -> bytes:
    buf = io.BytesIO()
    write_lines(lines, buf)
    return buf.getvalue()
