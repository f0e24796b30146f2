from __future__ import annotations

from ..domain.entities.conversion import ConversionResult

_UNITS = ("B", "KB", "MB", "GB")


def format_bytes(size: int) -> str:
    value = float(size)
    unit = 0
    while value >= 1024.0 and unit < len(_UNITS) - 1:
        value /= 1024.0
        unit += 1
    return f"{value:.1f} {_UNITS[unit]}"


def success_lines(result: ConversionResult) -> list[str]:
    lines = [
        f"✓ Conversion successful: {result.output_path}",
        f"  Time taken: {result.elapsed_sec:.2f}s",
    ]
    if result.input_size is not None and result.output_size is not None:
        lines.append(f"  Input size: {format_bytes(result.input_size)}")
        lines.append(f"  Output size: {format_bytes(result.output_size)}")
        ratio = result.size_ratio
        if ratio is not None:
            lines.append(f"  Size ratio: {ratio:.1f}%")
    return lines
