from .console_monitor_adapter import ConsoleErrorMonitorAdapter
from .json_monitor_adapter import JsonErrorMonitorAdapter

__all__ = [
    "ConsoleErrorMonitorAdapter",
    "JsonErrorMonitorAdapter",
]
