from .naming import derive_output_path
from .report import format_bytes, success_lines

__all__ = [
    "derive_output_path",
    "format_bytes",
    "success_lines",
]
