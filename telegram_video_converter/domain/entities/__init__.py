from .conversion import ConversionRequest, ConversionResult, EncodingProfile
from .error_log import ErrorLog

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "EncodingProfile",
    "ErrorLog",
]
