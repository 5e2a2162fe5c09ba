# pipetable/protocol.py
"""Protocol definition for streaming formatter plugins.

A formatter receives output text chunk by chunk and decides whether to:
- Pass through immediately (yield chunk as-is)
- Buffer internally (yield nothing, accumulate)
- Emit processed content (yield transformed text when ready)

These protocols are the public contract of PipeTableFormatterPlugin
(pipetable.plugin) for any host pipeline that drives it. The pipe-table
formatter always buffers: column widths are only known once the whole
table has been seen.

Usage:
    from pipetable import ConfigurableFormatter, create_plugin

    formatter: ConfigurableFormatter = create_plugin()
"""

from typing import Any, Dict, Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class FormatterPlugin(Protocol):
    """Protocol for streaming formatter plugins.

    - Has a unique name for identification
    - Has a priority for ordering (lower = runs first)
    - Processes chunks incrementally via process_chunk()
    - Flushes remaining content at the end via flush()
    - Resets state via reset()
    """

    @property
    def name(self) -> str:
        """Unique identifier for this formatter."""
        ...

    @property
    def priority(self) -> int:
        """Execution priority. Lower values run first.

        Suggested ranges:
        - 0-19: Pre-processing (normalization, encoding fixes)
        - 20-39: Structural formatting (tables)
        - 40-99: Everything else
        """
        ...

    def process_chunk(self, chunk: str) -> Iterator[str]:
        """Process an incoming chunk, yielding zero or more output chunks."""
        ...

    def flush(self) -> Iterator[str]:
        """Flush any buffered content, possibly processed."""
        ...

    def reset(self) -> None:
        """Reset internal state."""
        ...


@runtime_checkable
class ConfigurableFormatter(FormatterPlugin, Protocol):
    """Extended protocol for formatters that support configuration."""

    def initialize(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Initialize with a formatter-specific configuration dict."""
        ...

    def get_turn_feedback(self) -> Optional[str]:
        """Return and clear diagnostics gathered since the last call."""
        ...
