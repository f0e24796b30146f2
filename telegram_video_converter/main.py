from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from . import __version__
from .settings import Settings
from .application.use_cases.convert_video import ConvertVideoUseCase
from .domain.entities.conversion import EncodingProfile
from .domain.errors import ConverterError, UsageError
from .domain.ports.error_monitor_port import ErrorMonitorPort
from .infrastructure.monitoring.console_monitor_adapter import ConsoleErrorMonitorAdapter
from .infrastructure.monitoring.json_monitor_adapter import JsonErrorMonitorAdapter
from .infrastructure.tools.ffmpeg_encoder import FfmpegEncoder
from .processing.report import success_lines


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def _invalid_fields(e: ValidationError) -> str:
    return ", ".join(str(err["loc"][0]) for err in e.errors())


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise UsageError(f"Invalid configuration: {_invalid_fields(e)}") from e


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="telegram-video-converter",
        description="Convert videos to Telegram Mobile compatible format",
    )
    parser.add_argument("input", help="Input video file to convert")
    parser.add_argument("-o", "--output", help="Output file path (defaults to <input>_telegram.mp4)")
    parser.add_argument(
        "-b", "--bitrate", type=int, default=settings.CONVERTER_VIDEO_BITRATE_KBPS, help="Video bitrate in kbps"
    )
    parser.add_argument(
        "-a", "--audio-bitrate", type=int, default=settings.CONVERTER_AUDIO_BITRATE_KBPS, help="Audio bitrate in kbps"
    )
    parser.add_argument("-f", "--fps", type=int, default=settings.CONVERTER_FPS, help="Frame rate")
    parser.add_argument(
        "-c", "--crf", type=int, default=settings.CONVERTER_CRF,
        help="CRF quality (lower = better quality, 18-28 recommended)",
    )
    parser.add_argument("-y", "--overwrite", action="store_true", help="Overwrite output file if it exists")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show ffmpeg output")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_use_case(settings: Settings, *, verbose: bool = False) -> ConvertVideoUseCase:
    # Dependency Injection (Wiring)
    encoder = FfmpegEncoder(ffmpeg=settings.CONVERTER_FFMPEG_BINARY)
    monitor: ErrorMonitorPort
    if settings.CONVERTER_LOGS_DIR:
        monitor = JsonErrorMonitorAdapter(Path(settings.CONVERTER_LOGS_DIR) / "errors.json")
    else:
        monitor = ConsoleErrorMonitorAdapter(show_trace=verbose)
    return ConvertVideoUseCase(encoder, monitor, output_suffix=settings.CONVERTER_OUTPUT_SUFFIX)


def _profile_from_args(args: argparse.Namespace) -> EncodingProfile:
    try:
        return EncodingProfile(
            video_bitrate_kbps=args.bitrate,
            audio_bitrate_kbps=args.audio_bitrate,
            fps=args.fps,
            crf=args.crf,
        )
    except ValidationError as e:
        raise UsageError(f"Invalid encoding settings: {_invalid_fields(e)}") from e


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = load_settings()
        args = build_parser(settings).parse_args(argv)
        profile = _profile_from_args(args)
        use_case = build_use_case(settings, verbose=args.verbose)
        result = asyncio.run(
            use_case.execute(
                args.input,
                output=args.output,
                profile=profile,
                overwrite=args.overwrite,
                verbose=args.verbose,
            )
        )
    except ConverterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    for line in success_lines(result):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
