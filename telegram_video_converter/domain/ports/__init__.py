from .encoder_port import EncoderPort
from .error_monitor_port import ErrorMonitorPort

__all__ = [
    "EncoderPort",
    "ErrorMonitorPort",
]
