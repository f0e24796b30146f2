from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_PATH = Path.cwd() / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_ENV_PATH, env_file_encoding="utf-8", extra="ignore")

    CONVERTER_FFMPEG_BINARY: str = "ffmpeg"
    CONVERTER_VIDEO_BITRATE_KBPS: int = 2000
    CONVERTER_AUDIO_BITRATE_KBPS: int = 128
    CONVERTER_FPS: int = 25
    CONVERTER_CRF: int = 23
    CONVERTER_OUTPUT_SUFFIX: str = "_telegram"
    # errors.json is only written when this is set
    CONVERTER_LOGS_DIR: str | None = None
