# pipetable/plugin.py
"""Pipe-table formatter plugin for streaming output pipelines.

Buffers every chunk it receives and, on flush, renders the buffered text
as one canonical pipe table. Structural warnings are kept and handed out
through get_turn_feedback().

Usage:
    from pipetable.plugin import create_plugin

    plugin = create_plugin()
    for chunk in stream:
        for output in plugin.process_chunk(chunk):
            display(output)
    for output in plugin.flush():
        display(output)
    warnings = plugin.get_turn_feedback()
"""

from typing import Any, Dict, Iterator, List, Optional

from .formatter import format_table
from .trace import trace as _trace_write

# Priority for pipeline ordering (20-39 = structural formatting)
DEFAULT_PRIORITY = 25


def _trace(msg: str) -> None:
    _trace_write("PipeTableFormatter", msg)


class PipeTableFormatterPlugin:
    """Formatter that realigns a buffered GFM pipe table.

    Implements the ConfigurableFormatter protocol from pipetable.protocol.
    """

    def __init__(self):
        self._priority = DEFAULT_PRIORITY
        self._buffer: List[str] = []
        self._warnings: List[str] = []

    # ==================== FormatterPlugin Protocol ====================

    @property
    def name(self) -> str:
        """Unique identifier for this formatter."""
        return "pipe_table_formatter"

    @property
    def priority(self) -> int:
        """Execution priority (25 = structural formatting)."""
        return self._priority

    def process_chunk(self, chunk: str) -> Iterator[str]:
        """Buffer a chunk. Nothing is emitted until flush().

        Args:
            chunk: Incoming text chunk.

        Yields:
            Nothing; the table is rendered as a whole.
        """
        self._buffer.append(chunk)
        return iter(())

    def flush(self) -> Iterator[str]:
        """Render the buffered table and yield it."""
        if not self._buffer:
            return

        text = "".join(self._buffer)
        self._buffer = []

        result = format_table(text)
        self._warnings.extend(result.warnings)
        _trace(f"flush: {len(text)} chars in, {len(result.warnings)} warnings")

        if result.output:
            yield result.output

    def reset(self) -> None:
        """Reset state for a new table."""
        self._buffer = []
        self._warnings = []

    # ==================== ConfigurableFormatter Protocol ====================

    def initialize(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the formatter with configuration.

        Args:
            config: Dict with optional settings:
                - priority: Pipeline priority (default: 25)
        """
        config = config or {}
        self._priority = config.get("priority", DEFAULT_PRIORITY)

    def get_turn_feedback(self) -> Optional[str]:
        """Return structural warnings from the last flush, one per line.

        Drains the stored warnings.
        """
        if not self._warnings:
            return None
        feedback = "\n".join(self._warnings)
        self._warnings = []
        return feedback

    def shutdown(self) -> None:
        """Cleanup when plugin is disabled."""
        pass


def create_plugin() -> PipeTableFormatterPlugin:
    """Factory function to create a PipeTableFormatterPlugin instance."""
    return PipeTableFormatterPlugin()
