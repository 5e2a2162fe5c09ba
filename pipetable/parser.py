# pipetable/parser.py
"""Line splitting and row parsing for GFM pipe tables.

Turns raw input text into a sequence of parsed rows. Each row keeps its
trimmed cell strings and whether it looks like a delimiter row
(e.g. |:---|:---:|---:|).

Cells are opaque strings: a pipe is always a separator (no escaping) and
inline markdown is left untouched.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

# Only ASCII whitespace is trimmed; NBSP and friends count as cell content
WHITESPACE = " \t\r\n\x0b\x0c"

# Characters allowed in a delimiter cell, besides whitespace
DELIMITER_CHARS = frozenset("-:")


@dataclass(frozen=True)
class ParsedRow:
    """One table row: its cells and whether it is delimiter-like."""

    cells: Tuple[str, ...]
    is_delimiter: bool

    def __len__(self) -> int:
        return len(self.cells)


def split_lines(text: str) -> Iterator[str]:
    """Yield the non-empty, trimmed lines of the input text."""
    for line in text.strip(WHITESPACE).split("\n"):
        line = line.strip(WHITESPACE)
        if line:
            yield line


def parse_row(line: str) -> List[str]:
    """Parse a markdown table row into cells.

    Removes at most one leading and one trailing pipe, splits on the rest.
    """
    line = line.strip(WHITESPACE)
    if line.startswith("|"):
        line = line[1:]
    if line.endswith("|"):
        line = line[:-1]

    return [cell.strip(WHITESPACE) for cell in line.split("|")]


def _is_delimiter_cell(cell: str) -> bool:
    return all(char in DELIMITER_CHARS or char in WHITESPACE for char in cell)


def is_delimiter_row(cells: Sequence[str]) -> bool:
    """Check whether cells form a delimiter row.

    Every cell may only hold whitespace, hyphens and colons, and at least
    one cell must hold a hyphen.
    """
    if not all(_is_delimiter_cell(cell) for cell in cells):
        return False
    return any("-" in cell for cell in cells)


def parse_rows(text: str) -> List[ParsedRow]:
    """Split text into lines and parse every line into a ParsedRow."""
    rows = []
    for line in split_lines(text):
        cells = parse_row(line)
        rows.append(ParsedRow(cells=tuple(cells), is_delimiter=is_delimiter_row(cells)))
    return rows
