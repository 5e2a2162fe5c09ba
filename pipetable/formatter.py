# pipetable/formatter.py
"""Whole-table formatting: split, parse, analyze, render.

Usage:
    from pipetable import format_table

    result = format_table("|Name|Age|\n|---|---|\n|Bob|30|")
    print(result.output, end="")
    for warning in result.warnings:
        print(warning, file=sys.stderr)
"""

import logging
from typing import NamedTuple, Tuple

from .analyzer import analyze
from .parser import parse_rows
from .renderer import render_table

logger = logging.getLogger(__name__)


class FormatResult(NamedTuple):
    """Rendered table text and the structural warnings found on the way."""

    output: str
    warnings: Tuple[str, ...]


def format_table(text: str) -> FormatResult:
    """Reformat a pipe table into its canonical, aligned form.

    Args:
        text: The complete table text. Blank lines are dropped.

    Returns:
        FormatResult with the rendered text (empty when there are no rows)
        and any warnings.
    """
    rows = parse_rows(text)
    logger.debug("Parsed %d rows", len(rows))

    layout = analyze(rows)
    return FormatResult(output=render_table(layout), warnings=layout.warnings)
