"""
ASCII grid rendering for accumulated table cells.

Produces a bordered block such as::

    +------+---+
    | ITEM | N |
    +------+---+
    | a    | 1 |
    +------+---+

Cells may span several lines (nested tables render as multi-line cells).
"""

import re
from typing import List, Sequence

NUMERIC_RE = re.compile(r"-?(?:\d{1,3}(?:,\d{3})*|\d+)(?:\.\d+)?%?")


def _cell_lines(cell: str) -> List[str]:
    return cell.split("\n")


def _center(text: str, width: int) -> str:
    gap = width - len(text)
    left = gap // 2
    return " " * left + text + " " * (gap - left)


def _align_body(text: str, width: int, numeric: bool) -> str:
    return text.rjust(width) if numeric else text.ljust(width)


def _border(widths: Sequence[int]) -> str:
    return "+" + "+".join("-" * (width + 2) for width in widths) + "+"


def _row_lines(cells: Sequence[str], widths: Sequence[int], centered: bool) -> List[str]:
    split_cells = [_cell_lines(cell) for cell in cells]
    height = max(len(lines) for lines in split_cells)
    numeric = [bool(NUMERIC_RE.fullmatch(cell)) for cell in cells]

    lines = []
    for line_no in range(height):
        parts = []
        for col, cell_lines in enumerate(split_cells):
            text = cell_lines[line_no] if line_no < len(cell_lines) else ""
            if centered:
                padded = _center(text, widths[col])
            else:
                padded = _align_body(text, widths[col], numeric[col])
            parts.append(f" {padded} ")
        lines.append("|" + "|".join(parts) + "|")
    return lines


def _pad(cells: Sequence[str], columns: int) -> List[str]:
    return list(cells) + [""] * (columns - len(cells))


def render_grid(
    header: Sequence[str],
    body: Sequence[Sequence[str]],
    footer: Sequence[str],
    uppercase_headers: bool = True,
) -> str:
    """
    Draw header, body rows and footer as a bordered text grid.

    Args:
        header: Header cell strings (may be empty)
        body: Body rows; rows without cells are skipped
        footer: Footer cell strings (may be empty)
        uppercase_headers: Upper-case header and footer cells

    Returns:
        Grid text, each line terminated by a newline; empty string when
        there is nothing to draw
    """
    rows = [list(row) for row in body if row]
    columns = max([len(header), len(footer)] + [len(row) for row in rows])
    if columns == 0:
        return ""

    if uppercase_headers:
        header = [cell.upper() for cell in header]
        footer = [cell.upper() for cell in footer]

    header = _pad(header, columns) if header else []
    footer = _pad(footer, columns) if footer else []
    rows = [_pad(row, columns) for row in rows]

    widths = [0] * columns
    for row in [header, footer] + rows:
        for col, cell in enumerate(row):
            for line in _cell_lines(cell):
                widths[col] = max(widths[col], len(line))

    border = _border(widths)
    output = [border]
    if header:
        output.extend(_row_lines(header, widths, centered=True))
        output.append(border)
    if rows:
        for row in rows:
            output.extend(_row_lines(row, widths, centered=False))
        output.append(border)
    if footer:
        output.extend(_row_lines(footer, widths, centered=True))
        output.append(border)

    return "\n".join(output) + "\n"
