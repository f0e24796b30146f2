from .monitoring import ConsoleErrorMonitorAdapter, JsonErrorMonitorAdapter
from .tools import FfmpegEncoder

__all__ = [
    "ConsoleErrorMonitorAdapter",
    "JsonErrorMonitorAdapter",
    "FfmpegEncoder",
]
