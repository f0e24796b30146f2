from __future__ import annotations

import subprocess

from ...domain.entities.conversion import ConversionRequest
from ...domain.errors import EncodingError
from ...domain.ports.encoder_port import EncoderPort
from ...shared.fs__shared_util import run, which


class FfmpegEncoder(EncoderPort):
    """H.264 baseline / AAC MP4 encoding that plays inline in Telegram mobile."""

    def __init__(self, *, ffmpeg: str = "ffmpeg"):
        self.ffmpeg = ffmpeg

    @property
    def binary(self) -> str:
        return self.ffmpeg

    def is_available(self) -> bool:
        if which(self.ffmpeg) is None:
            return False
        try:
            run([self.ffmpeg, "-version"], check=True, capture=True)
        except (OSError, subprocess.CalledProcessError):
            return False
        return True

    def build_command(self, request: ConversionRequest) -> list[str]:
        profile = request.profile
        cmd = [self.ffmpeg, "-i", str(request.input_path)]
        if request.overwrite:
            cmd.append("-y")

        cmd += [
            "-c:v", "libx264",
            "-profile:v", "baseline",
            "-level", "3.0",
            "-pix_fmt", "yuv420p",
            "-crf", str(profile.crf),
            "-maxrate", f"{profile.video_bitrate_kbps}k",
            "-bufsize", f"{profile.bufsize_kbps}k",
            "-r", str(profile.fps),
        ]
        cmd += [
            "-c:a", "aac",
            "-ar", "44100",
            "-ac", "2",
            "-b:a", f"{profile.audio_bitrate_kbps}k",
        ]
        cmd += ["-movflags", "+faststart", "-f", "mp4", str(request.output_path)]

        if not request.verbose:
            cmd += ["-loglevel", "error"]
        return cmd

    def encode(self, request: ConversionRequest) -> int:
        cmd = self.build_command(request)
        try:
            completed = run(cmd, check=False)
        except OSError as e:
            raise EncodingError(f"Failed to execute {self.ffmpeg}: {e}") from e
        return completed.returncode
