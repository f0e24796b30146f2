import pytest
from pathlib import Path
from unittest.mock import MagicMock, patch

from telegram_video_converter.domain.entities.conversion import ConversionRequest, EncodingProfile
from telegram_video_converter.domain.errors import EncodingError
from telegram_video_converter.infrastructure.tools.ffmpeg_encoder import FfmpegEncoder

MOBILE_FLAGS = [
    "-c:v", "libx264",
    "-profile:v", "baseline",
    "-level", "3.0",
    "-pix_fmt", "yuv420p",
    "-crf", "23",
    "-maxrate", "2000k",
    "-bufsize", "4000k",
    "-r", "25",
    "-c:a", "aac",
    "-ar", "44100",
    "-ac", "2",
    "-b:a", "128k",
    "-movflags", "+faststart",
    "-f", "mp4",
]


def _request(**kwargs) -> ConversionRequest:
    return ConversionRequest(input_path=Path("test.mp4"), output_path=Path("test_telegram.mp4"), **kwargs)


def test_build_command_is_exactly_the_fixed_template():
    cmd = FfmpegEncoder().build_command(_request())
    assert cmd == ["ffmpeg", "-i", "test.mp4", *MOBILE_FLAGS, "test_telegram.mp4", "-loglevel", "error"]


def test_build_command_overwrite_and_verbose():
    cmd = FfmpegEncoder(ffmpeg="/opt/ffmpeg").build_command(_request(overwrite=True, verbose=True))
    assert cmd[:4] == ["/opt/ffmpeg", "-i", "test.mp4", "-y"]
    assert cmd[-1] == "test_telegram.mp4"
    assert "-loglevel" not in cmd


def test_build_command_uses_profile_values():
    profile = EncodingProfile(video_bitrate_kbps=1500, audio_bitrate_kbps=96, fps=30, crf=28)
    cmd = FfmpegEncoder().build_command(_request(profile=profile))
    assert cmd[cmd.index("-crf") + 1] == "28"
    assert cmd[cmd.index("-maxrate") + 1] == "1500k"
    assert cmd[cmd.index("-bufsize") + 1] == "3000k"
    assert cmd[cmd.index("-r") + 1] == "30"
    assert cmd[cmd.index("-b:a") + 1] == "96k"


def test_encode_returns_child_exit_status():
    encoder = FfmpegEncoder()
    with patch(
        "telegram_video_converter.infrastructure.tools.ffmpeg_encoder.run",
        return_value=MagicMock(returncode=1),
    ) as mock_run:
        assert encoder.encode(_request()) == 1
    mock_run.assert_called_once_with(encoder.build_command(_request()), check=False)


def test_encode_missing_binary_raises_encoding_error(tmp_path):
    encoder = FfmpegEncoder(ffmpeg=str(tmp_path / "no-such-ffmpeg"))
    with pytest.raises(EncodingError):
        encoder.encode(_request())


def test_is_available_false_when_not_on_path(tmp_path):
    assert FfmpegEncoder(ffmpeg=str(tmp_path / "no-such-ffmpeg")).is_available() is False


def test_is_available_probes_version():
    with patch("telegram_video_converter.infrastructure.tools.ffmpeg_encoder.which", return_value="/usr/bin/ffmpeg"), \
         patch("telegram_video_converter.infrastructure.tools.ffmpeg_encoder.run") as mock_run:
        assert FfmpegEncoder().is_available() is True
    mock_run.assert_called_once_with(["ffmpeg", "-version"], check=True, capture=True)


def test_binary_reports_configured_path():
    assert FfmpegEncoder(ffmpeg="/opt/ffmpeg").binary == "/opt/ffmpeg"
