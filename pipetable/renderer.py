# pipetable/renderer.py
"""Render an analyzed table back to canonical pipe-table text.

Data rows are padded to their column width using the column alignment.
Every delimiter-like row is rebuilt from width and alignment, e.g.:

    | Left | Center | Right |
    | ---- | :----: | ----: |
    | a    |   b    |     c |
"""

from typing import List

from .analyzer import Alignment, ColumnSpec, TableLayout
from .parser import ParsedRow

CELL_SEPARATOR = " | "
ROW_PREFIX = "| "
ROW_SUFFIX = " |"


def pad_cell(text: str, width: int, alignment: Alignment = Alignment.LEFT) -> str:
    """Pad a string to a target width.

    For center alignment an odd leftover space goes to the right.

    Args:
        text: The string to pad.
        width: The desired width.
        alignment: How to place the text within the width.

    Returns:
        The padded string (unchanged if already at least width long).
    """
    padding_needed = max(0, width - len(text))

    if alignment == Alignment.RIGHT:
        return " " * padding_needed + text
    elif alignment == Alignment.CENTER:
        left_pad = padding_needed // 2
        right_pad = padding_needed - left_pad
        return " " * left_pad + text + " " * right_pad
    else:  # left
        return text + " " * padding_needed


def delimiter_cell(column: ColumnSpec) -> str:
    """Build a delimiter cell ('---', '--:', ':-:') for a column."""
    width = column.width
    if column.alignment == Alignment.RIGHT:
        return "-" * (width - 1) + ":" if width >= 2 else "-:"
    elif column.alignment == Alignment.CENTER:
        return ":" + "-" * (width - 2) + ":" if width >= 3 else ":-:"
    return "-" * width


def render_row(row: ParsedRow, columns: List[ColumnSpec]) -> str:
    """Render one row.

    Only the row's own cells are rendered; a short row is not filled up
    with empty cells.
    """
    formatted_cells = []
    for index, cell in enumerate(row.cells):
        column = columns[index]
        if row.is_delimiter:
            formatted_cells.append(delimiter_cell(column))
        else:
            formatted_cells.append(pad_cell(cell, column.width, column.alignment))

    return ROW_PREFIX + CELL_SEPARATOR.join(formatted_cells) + ROW_SUFFIX


def render_table(layout: TableLayout) -> str:
    """Render every row of the layout, one newline-terminated line each."""
    columns = list(layout.columns)
    return "".join(render_row(row, columns) + "\n" for row in layout.rows)
