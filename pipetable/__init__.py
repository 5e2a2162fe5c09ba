# pipetable/__init__.py
"""Realign GitHub-Flavored-Markdown pipe tables.

Parses a pipe table, checks its structure, and renders it back with
consistent column widths, preserved alignment markers and clean padding.
"""

__version__ = "0.1.0"

from .analyzer import Alignment, ColumnSpec, TableLayout, analyze
from .formatter import FormatResult, format_table
from .parser import ParsedRow, parse_row, parse_rows, split_lines
from .plugin import PipeTableFormatterPlugin, create_plugin
from .protocol import ConfigurableFormatter, FormatterPlugin
from .renderer import render_table

__all__ = [
    "Alignment",
    "ColumnSpec",
    "ConfigurableFormatter",
    "FormatResult",
    "FormatterPlugin",
    "ParsedRow",
    "PipeTableFormatterPlugin",
    "TableLayout",
    "analyze",
    "create_plugin",
    "format_table",
    "parse_row",
    "parse_rows",
    "render_table",
    "split_lines",
]
