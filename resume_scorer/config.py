import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    app_version: str
    log_level: str
    max_upload_mb: int
    min_text_length: int
    words_per_page: int

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


settings = Settings(
    app_version=_get_env("APP_VERSION", "1.0.0") or "1.0.0",
    log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    max_upload_mb=_get_env_int("MAX_UPLOAD_MB", 5),
    min_text_length=_get_env_int("MIN_TEXT_LENGTH", 20),
    words_per_page=_get_env_int("WORDS_PER_PAGE", 500),
)

if settings.words_per_page <= 0:
    raise RuntimeError("WORDS_PER_PAGE must be a positive integer.")
