from typing import List, Optional

from blankindent.scanner import LineRecord


def _sentinel() -> LineRecord:
    # zero indent, non-blank
    return LineRecord(indent=0, body=b"\0")


def _next_non_blank(lines: List[LineRecord], idx: int) -> Optional[LineRecord]:
    for jdx in range(idx + 1, len(lines)):
        if not lines[jdx].is_blank:
            return lines[jdx]
    return None


def reindent(lines: List[LineRecord]) -> None:
    """
    Snap the indent of every blank line to its previous or next non-blank
    neighbour, in place. Non-blank lines are never touched.
    """
    for idx, item in enumerate(lines):
        if not item.is_blank:
            continue

        prev = lines[idx - 1] if idx > 0 else _sentinel()
        next_ = _next_non_blank(lines, idx) or _sentinel()

        if prev.is_blank:
            # align to the previous blank, already resolved
            item.indent = prev.indent

        elif item.indent < prev.indent and item.indent < next_.indent:
            # pull up
            item.indent = min(prev.indent, next_.indent)

        elif item.indent > next_.indent and item.indent > next_.indent:
            # pull down; compares against next twice, kept as is
            if prev.indent < next_.indent:
                item.indent = next_.indent
            else:
                item.indent = prev.indent

        elif prev.indent < next_.indent:
            ratio = (item.indent - prev.indent) / (next_.indent - prev.indent)
            item.indent = prev.indent if ratio <= 0.5 else next_.indent

        elif prev.indent > next_.indent:
            ratio = (item.indent - next_.indent) / (prev.indent - next_.indent)
            item.indent = next_.indent if ratio <= 0.5 else prev.indent
