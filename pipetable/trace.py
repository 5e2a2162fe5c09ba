# pipetable/trace.py
"""Trace logging to a file.

Tracing is off unless PIPETABLE_TRACE_LOG names a file. Trace output never
goes to stdout or stderr, so it cannot disturb the formatted table or its
warnings.

Usage:
    from pipetable.trace import trace

    trace("MyComponent", "some message")
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

TRACE_ENV_VAR = "PIPETABLE_TRACE_LOG"


def resolve_trace_path(*env_vars: str) -> Optional[str]:
    """Resolve the trace file path from environment variables.

    Checks env vars in order; the first non-empty value wins.

    Returns:
        Resolved file path, or None if tracing is disabled.
    """
    for var in env_vars:
        value = os.environ.get(var)
        if value:
            return value
    return None


def trace_write(component: str, msg: str, trace_path: Optional[str]) -> None:
    """Append one "[time] [component] msg" line to trace_path.

    Does nothing without a path. Parent directories are created as needed,
    and I/O errors are ignored.
    """
    if not trace_path:
        return
    stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    path = Path(trace_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(f"[{stamp}] [{component}] {msg}\n")
    except OSError:
        pass  # Tracing must not break formatting


def trace(component: str, msg: str) -> None:
    """Write a trace message to the file named by PIPETABLE_TRACE_LOG."""
    trace_write(component, msg, resolve_trace_path(TRACE_ENV_VAR))
