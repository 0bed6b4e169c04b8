"""
Box-drawn text table renderer.

Renders a header row and data rows as a table for console display:

    ╔═══════╤════════════════╗
    ║ Field │ Transformation ║
    ╠═══════╪════════════════╣
    ║ a     │ 1              ║
    ╟───────┼────────────────╢
    ║ b     │ 2              ║
    ╚═══════╧════════════════╝

Cells are left aligned. Multi-line cells span several text lines.
A table with no rows shows a single "(empty)" row.
"""

from typing import List, Sequence

EMPTY_LABEL = "(empty)"


def _cell_lines(cell: object) -> List[str]:
    return str(cell).split("\n")


def _rule(widths: List[int], left: str, fill: str, joint: str, right: str) -> str:
    return left + joint.join(fill * w for w in widths) + right


def _row_lines(cells: Sequence[object], widths: List[int]) -> List[str]:
    split = [_cell_lines(c) for c in cells]
    height = max(len(lines) for lines in split)
    out = []
    for line in range(height):
        parts = []
        for col, lines in enumerate(split):
            text = lines[line] if line < len(lines) else ""
            parts.append(" " + text.ljust(widths[col] - 2) + " ")
        out.append("║" + "│".join(parts) + "║")
    return out


def render_table(headers: Sequence[object], rows: Sequence[Sequence[object]]) -> str:
    """
    Render headers and rows as a box-drawn table.

    Args:
        headers: Column titles
        rows: Data rows, each with one cell per header

    Returns:
        Table text, one line per table line, newline terminated

    Raises:
        ValueError: If there are no headers or a row has the wrong width
    """
    if not headers:
        raise ValueError("Table needs at least one column")
    columns = len(headers)
    for i, row in enumerate(rows):
        if len(row) != columns:
            raise ValueError(f"Row {i} has {len(row)} cells, expected {columns}")

    widths = []
    for col in range(columns):
        cells = [headers[col]] + [row[col] for row in rows]
        widths.append(max(len(line) for c in cells for line in _cell_lines(c)) + 2)
    if not rows:
        # the empty label must fit inside the frame
        shortfall = len(EMPTY_LABEL) + 2 - (sum(widths) + columns - 1)
        if shortfall > 0:
            widths[-1] += shortfall

    lines = [_rule(widths, "╔", "═", "╤", "╗")]
    lines.extend(_row_lines(headers, widths))

    if not rows:
        inner = sum(widths) + columns - 1
        lines.append(_rule(widths, "╠", "═", "╧", "╣"))
        lines.append("║" + (" " + EMPTY_LABEL).ljust(inner) + "║")
        lines.append("╚" + "═" * inner + "╝")
        return "\n".join(lines) + "\n"

    lines.append(_rule(widths, "╠", "═", "╪", "╣"))
    for i, row in enumerate(rows):
        if i > 0:
            lines.append(_rule(widths, "╟", "─", "┼", "╢"))
        lines.extend(_row_lines(row, widths))
    lines.append(_rule(widths, "╚", "═", "╧", "╝"))
    return "\n".join(lines) + "\n"
