"""
Table - Console rendering of serialized tables
"""

import sys
import unicodedata
from typing import List, Sequence

# ANSI styles: red border, magenta header background
BORDER_STYLE = "\x1b[31m"
HEADER_STYLE = "\x1b[45m"
RESET = "\x1b[0m"


def _norm(s) -> str:
    return unicodedata.normalize("NFC", "" if s is None else str(s))


def render_table(rows: Sequence[Sequence[str]], color: bool = False) -> str:
    """
    Render rows as a bordered, center-aligned table

    Row 0 is the header and is separated from the body by a rule.
    With color, styles are applied after padding so alignment is kept.
    """
    if not rows:
        return ""

    width = max(len(r) for r in rows)
    cells: List[List[str]] = [
        [_norm(r[i]) if i < len(r) else "" for i in range(width)] for r in rows
    ]
    sizes = [max(len(row[i]) for row in cells) for i in range(width)]

    def paint(text, style):
        return f"{style}{text}{RESET}" if color else text

    def rule(left, mid, right):
        return paint(left + mid.join("─" * (n + 2) for n in sizes) + right, BORDER_STYLE)

    def line(row, style=None):
        bar = paint("│", BORDER_STYLE)
        padded = [f" {c.center(n)} " for c, n in zip(row, sizes)]
        if style:
            padded = [paint(p, style) for p in padded]
        return bar + bar.join(padded) + bar

    out = [rule("┌", "┬", "┐"), line(cells[0], HEADER_STYLE)]
    if len(cells) > 1:
        out.append(rule("├", "┼", "┤"))
        out.extend(line(row) for row in cells[1:])
    out.append(rule("└", "┴", "┘"))
    return "\n".join(out)


def print_table(rows: Sequence[Sequence[str]], stream=None):
    """Write the rendered table to stdout, colored on a terminal"""
    stream = sys.stdout if stream is None else stream
    color = hasattr(stream, "isatty") and stream.isatty()
    print(render_table(rows, color=color), file=stream)
