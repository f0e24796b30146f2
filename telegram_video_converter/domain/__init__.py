from .entities import ConversionRequest, ConversionResult, EncodingProfile, ErrorLog
from .errors import ConverterError, EncodingError, UsageError
from .ports import EncoderPort, ErrorMonitorPort

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "EncodingProfile",
    "ErrorLog",
    "ConverterError",
    "EncodingError",
    "UsageError",
    "EncoderPort",
    "ErrorMonitorPort",
]
