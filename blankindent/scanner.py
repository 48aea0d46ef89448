from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

LEADING_WHITESPACE = b" \t"
TRAILING_WHITESPACE = b"\n\r \t\f"

TAB = ord("\t")


@dataclass
class LineRecord:
    indent: int
    body: bytes

    @property
    def is_blank(self) -> bool:
        return len(self.body) == 0


def line_markers(line: bytes) -> Tuple[int, int, int]:
    """
    Locate the body of a raw line.

    Returns (start, stop, tabs): start is the offset of the first byte that is
    not a space or tab, stop is one past the last byte that is not trailing
    whitespace, and tabs is the number of tabs inside line[:start].
    """
    start = 0
    tabs = 0
    while start < len(line) and line[start] in LEADING_WHITESPACE:
        if line[start] == TAB:
            tabs += 1
        start += 1

    stop = len(line)
    while stop > start and line[stop - 1] in TRAILING_WHITESPACE:
        stop -= 1

    return start, stop, tabs


ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(line: bytes) -> str:
    """Double-quote a raw line; invalid UTF-8 bytes come out as \\xNN."""
    out = []
    for ch in line.decode("utf-8", errors="surrogateescape"):
        code = ord(ch)
        if ch in ESCAPES:
            out.append(ESCAPES[ch])
        elif 0xDC80 <= code <= 0xDCFF:
            # undecodable byte
            out.append("\\x%02x" % (code - 0xDC00))
        elif ch.isprintable():
            out.append(ch)
        elif code < 0x80:
            out.append("\\x%02x" % code)
        elif code <= 0xFFFF:
            out.append("\\u%04x" % code)
        else:
            out.append("\\U%08x" % code)
    return '"' + "".join(out) + '"'


def read_lines(
    data: bytes,
    tab_width: int,
    log: Optional[Callable[[Any], None]] = None,
) -> List[LineRecord]:
    """Split raw file content into line records, expanding leading tabs."""
    lines: List[LineRecord] = []
    offset = 0
    count = 0

    while True:
        count += 1
        end = data.find(b"\n", offset)
        if end < 0:
            # last line without terminator
            size = len(data) - offset
        else:
            size = end - offset + 1
        if size == 0:
            break

        line = data[offset:offset + size]
        start, stop, tabs = line_markers(line)
        indent = start + (tab_width - 1) * tabs
        lines.append(LineRecord(indent=indent, body=line[start:stop]))

        if log is not None:
            log("%3d: size=%-2d %2d:%-2d ind=%-2d %s" % (count, size, start, stop, indent, _quote(line)))

        if end < 0:
            break
        offset += size

    return lines
