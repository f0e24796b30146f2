from pathlib import Path

from telegram_video_converter.domain.entities.conversion import ConversionResult
from telegram_video_converter.processing.report import format_bytes, success_lines


def test_format_bytes_units():
    assert format_bytes(0) == "0.0 B"
    assert format_bytes(1023) == "1023.0 B"
    assert format_bytes(1024) == "1.0 KB"
    assert format_bytes(1536) == "1.5 KB"
    assert format_bytes(5 * 1024 * 1024) == "5.0 MB"
    assert format_bytes(3 * 1024 ** 3) == "3.0 GB"


def test_format_bytes_caps_at_gigabytes():
    assert format_bytes(2048 * 1024 ** 3) == "2048.0 GB"


def test_success_lines_with_sizes():
    result = ConversionResult(
        input_path=Path("in.mov"),
        output_path=Path("in_telegram.mp4"),
        returncode=0,
        elapsed_sec=1.234,
        input_size=2048,
        output_size=1024,
    )
    lines = success_lines(result)
    assert lines[0] == "✓ Conversion successful: in_telegram.mp4"
    assert lines[1] == "  Time taken: 1.23s"
    assert "  Input size: 2.0 KB" in lines
    assert "  Output size: 1.0 KB" in lines
    assert lines[-1] == "  Size ratio: 50.0%"


def test_success_lines_without_sizes():
    result = ConversionResult(
        input_path=Path("in.mov"),
        output_path=Path("in_telegram.mp4"),
        returncode=0,
        elapsed_sec=0.5,
    )
    assert len(success_lines(result)) == 2
