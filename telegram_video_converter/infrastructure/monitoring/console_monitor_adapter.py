from __future__ import annotations

import sys
from ...domain.ports.error_monitor_port import ErrorMonitorPort
from ...domain.entities.error_log import ErrorLog


class ConsoleErrorMonitorAdapter(ErrorMonitorPort):
    """Writes nothing to disk; prints the stack trace to stderr when asked to."""

    def __init__(self, *, show_trace: bool = False, stream=None):
        self.show_trace = show_trace
        self.stream = stream

    async def log_error(self, error: ErrorLog) -> None:
        if self.show_trace and error.stack_trace:
            print(error.stack_trace.rstrip(), file=self.stream or sys.stderr)
