from __future__ import annotations

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field


class EncodingProfile(BaseModel):
    video_bitrate_kbps: int = Field(default=2000, ge=1)
    audio_bitrate_kbps: int = Field(default=128, ge=1)
    fps: int = Field(default=25, ge=1)
    # x264 CRF scale; 18-28 is the useful range
    crf: int = Field(default=23, ge=0, le=51)

    @property
    def bufsize_kbps(self) -> int:
        return self.video_bitrate_kbps * 2

    def describe(self) -> str:
        return (
            f"{self.video_bitrate_kbps}kbps video, {self.audio_bitrate_kbps}kbps audio, "
            f"{self.fps}fps, CRF {self.crf}"
        )


class ConversionRequest(BaseModel):
    input_path: Path
    output_path: Path
    profile: EncodingProfile = Field(default_factory=EncodingProfile)
    overwrite: bool = False
    verbose: bool = False


class ConversionResult(BaseModel):
    input_path: Path
    output_path: Path
    returncode: int
    elapsed_sec: float
    input_size: Optional[int] = None
    output_size: Optional[int] = None

    @property
    def size_ratio(self) -> float | None:
        if self.input_size is None or self.output_size is None or self.input_size == 0:
            return None
        return self.output_size / self.input_size * 100.0
