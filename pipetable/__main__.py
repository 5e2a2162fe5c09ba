#!/usr/bin/env python3
"""pipetable - realign a GitHub-Flavored-Markdown pipe table.

Reads one table from standard input and writes it back to standard output
with consistent column widths and rebuilt delimiter rows. Structural
problems are reported on standard error, one line each; they never change
the exit status. Arguments other than --env-file, --version and --help
are ignored.

Usage:
    pipetable < table.md
    python -m pipetable < table.md > aligned.md
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import DEFAULT_ENV_FILE, configure_logging, load_environment
from .formatter import format_table
from .trace import trace

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pipetable",
        allow_abbrev=False,
        description="Realign a GitHub-Flavored-Markdown pipe table read from stdin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pipetable < table.md
  printf '|a|b|\\n|-|-:|\\n|1|22|\\n' | pipetable
        """,
    )
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help=f"Path to .env file (default: {DEFAULT_ENV_FILE})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args, ignored = build_parser().parse_known_args(argv)

    load_environment(args.env_file)
    configure_logging()
    if ignored:
        logger.debug("Ignoring arguments: %s", " ".join(ignored))

    text = sys.stdin.read()
    logger.debug("Read %d characters from stdin", len(text))

    result = format_table(text)
    trace("cli", f"formatted table: {len(result.warnings)} warnings")

    for warning in result.warnings:
        print(warning, file=sys.stderr)
    sys.stdout.write(result.output)
    sys.stdout.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())
