# pipetable/analyzer.py
"""Structural analysis of parsed pipe-table rows.

Locates the header/delimiter pair, checks the table for structural
problems and derives one ColumnSpec (width + alignment) per column.

Problems never stop the analysis. They are collected as warning strings
on the returned TableLayout and it is up to the caller to report them.

Usage:
    from pipetable.parser import parse_rows
    from pipetable.analyzer import analyze

    layout = analyze(parse_rows(text))
    for warning in layout.warnings:
        print(warning, file=sys.stderr)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .parser import ParsedRow

logger = logging.getLogger(__name__)

# Warning messages
NO_DELIMITER_WARNING = "No delimiter row found; table may not render properly."
MISPLACED_DELIMITER_WARNING = (
    "Delimiter row should come after the header row; "
    "table structure may be non-standard."
)
DELIMITER_COLUMNS_WARNING = "Header row has {header} columns but delimiter row has {delimiter} columns."
ROW_COLUMNS_WARNING = "Row {row} has {count} columns but header has {header} columns."


class Alignment(str, Enum):
    """Column alignment encoded by a delimiter cell."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class ColumnSpec:
    """Display width and alignment of one column."""

    width: int
    alignment: Alignment = Alignment.LEFT


@dataclass(frozen=True)
class TableLayout:
    """Result of analyzing a table: rows, structure, columns and warnings."""

    rows: Tuple[ParsedRow, ...]
    header_index: Optional[int]
    delimiter_index: Optional[int]
    delimiter_rows: FrozenSet[int]
    columns: Tuple[ColumnSpec, ...]
    warnings: Tuple[str, ...]

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def widths(self) -> List[int]:
        return [column.width for column in self.columns]

    @property
    def alignments(self) -> List[Alignment]:
        return [column.alignment for column in self.columns]


def parse_alignment(cell: str) -> Alignment:
    """Parse alignment from a delimiter cell (e.g. ':---', ':---:', '---:')."""
    cell = cell.strip()
    if cell.startswith(":") and cell.endswith(":"):
        return Alignment.CENTER
    elif cell.endswith(":"):
        return Alignment.RIGHT
    return Alignment.LEFT


def find_delimiter(rows: Sequence[ParsedRow]) -> Optional[int]:
    """Return the index of the canonical delimiter row, if any.

    The first delimiter-like row after row 0 wins.
    """
    for index, row in enumerate(rows):
        if index > 0 and row.is_delimiter:
            return index
    return None


def check_structure(
    rows: Sequence[ParsedRow],
    header_index: Optional[int],
    delimiter_index: Optional[int],
) -> List[str]:
    """Collect warnings about the table structure.

    Args:
        rows: All parsed rows.
        header_index: Index of the header row, or None.
        delimiter_index: Index of the canonical delimiter row, or None.

    Returns:
        Warning messages, in the order they were found.
    """
    warnings: List[str] = []

    if delimiter_index is None or header_index is None:
        warnings.append(NO_DELIMITER_WARNING)
        return warnings

    # header_index is pinned to 0 and the delimiter search starts at 1, so
    # this only fires if that pairing ever changes.
    if delimiter_index <= header_index:
        warnings.append(MISPLACED_DELIMITER_WARNING)

    header_count = len(rows[header_index])
    if len(rows) > 1:
        delimiter_count = len(rows[delimiter_index])
        if header_count != delimiter_count:
            warnings.append(
                DELIMITER_COLUMNS_WARNING.format(header=header_count, delimiter=delimiter_count)
            )

    for index, row in enumerate(rows):
        if index in (header_index, delimiter_index):
            continue
        # Off by one is common in hand-written tables and tolerated
        if abs(len(row) - header_count) > 1:
            warnings.append(
                ROW_COLUMNS_WARNING.format(row=index + 1, count=len(row), header=header_count)
            )

    return warnings


def _widen(widths: Tuple[int, ...], row: ParsedRow) -> Tuple[int, ...]:
    """Fold one row's cell lengths into the running column widths."""
    merged = list(widths) + [0] * max(0, len(row) - len(widths))
    for index, cell in enumerate(row.cells):
        merged[index] = max(merged[index], len(cell))
    return tuple(merged)


def compute_widths(rows: Sequence[ParsedRow]) -> Tuple[int, ...]:
    """Compute the maximum cell length per column across all rows.

    Delimiter rows count with their raw dash/colon text.
    """
    return reduce(_widen, rows, ())


def compute_alignments(
    rows: Sequence[ParsedRow],
    delimiter_index: Optional[int],
    column_count: int,
) -> List[Alignment]:
    """Derive per-column alignment from the canonical delimiter row.

    Without a delimiter every column is left-aligned, sized from the first
    row. Either way the list is then padded with LEFT up to column_count.
    """
    if delimiter_index is not None:
        alignments = [parse_alignment(cell) for cell in rows[delimiter_index].cells]
    else:
        first_count = len(rows[0]) if rows else 0
        alignments = [Alignment.LEFT] * first_count

    while len(alignments) < column_count:
        alignments.append(Alignment.LEFT)

    return alignments


def analyze(rows: Sequence[ParsedRow]) -> TableLayout:
    """Analyze parsed rows into a TableLayout.

    Never raises for malformed tables; anomalies end up in
    TableLayout.warnings.
    """
    rows = tuple(rows)

    delimiter_index = find_delimiter(rows)
    header_index = 0 if delimiter_index is not None else None
    delimiter_rows = frozenset(index for index, row in enumerate(rows) if row.is_delimiter)

    warnings = check_structure(rows, header_index, delimiter_index)

    widths = compute_widths(rows)
    alignments = compute_alignments(rows, delimiter_index, len(widths))
    columns = tuple(
        ColumnSpec(width=width, alignment=alignment)
        for width, alignment in zip(widths, alignments)
    )

    logger.debug(
        "Analyzed %d rows: delimiter=%s, columns=%d, warnings=%d",
        len(rows), delimiter_index, len(columns), len(warnings),
    )

    return TableLayout(
        rows=rows,
        header_index=header_index,
        delimiter_index=delimiter_index,
        delimiter_rows=delimiter_rows,
        columns=columns,
        warnings=tuple(warnings),
    )
