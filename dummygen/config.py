import os
from dataclasses import dataclass, replace
from typing import Optional

from dummygen.constants import CHUNK_SIZE, JPEG_QUALITY


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class Settings:
    output_dir: Optional[str] = None
    log_level: str = "INFO"
    chunk_size: int = CHUNK_SIZE
    jpeg_quality: int = JPEG_QUALITY

    def with_overrides(self, **overrides) -> "Settings":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _positive_int(name: str, default: int, upper: Optional[int] = None) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got '{raw}'")
    if value <= 0 or (upper is not None and value > upper):
        raise ConfigError(f"{name} out of range: {value}")
    return value


def get_settings() -> Settings:
    return Settings(
        output_dir=os.environ.get("DUMMYGEN_OUTPUT_DIR") or None,
        log_level=os.environ.get("DUMMYGEN_LOG_LEVEL", "INFO"),
        chunk_size=_positive_int("DUMMYGEN_CHUNK_SIZE", CHUNK_SIZE),
        jpeg_quality=_positive_int("DUMMYGEN_JPEG_QUALITY", JPEG_QUALITY, upper=100),
    )
