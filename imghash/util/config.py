"""Configuration constants and environment-derived settings."""
import os
from dataclasses import dataclass
from typing import Optional

URL_PREFIXES = ("http://", "https://")

# Decoders tried on image content; anything else is rejected.
SUPPORTED_FORMATS = ("PNG", "JPEG", "GIF")

HASH_SIZE = 8  # 8x8 -> 64-bit hashes
HASH_BITS = HASH_SIZE * HASH_SIZE

LOG_FILENAME = "imghash.log"
# CRITICAL is left out: it would hide the ERROR line failures are reported on
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

ENV_LOG_DIR = "IMGHASH_LOG_DIR"
ENV_LOG_LEVEL = "IMGHASH_LOG_LEVEL"
ENV_HTTP_TIMEOUT = "IMGHASH_HTTP_TIMEOUT"


@dataclass
class Settings:
    log_dir: Optional[str] = None
    log_level: str = "INFO"
    http_timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        env = os.environ if environ is None else environ
        timeout_raw = env.get(ENV_HTTP_TIMEOUT, "").strip()
        timeout = None
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_HTTP_TIMEOUT} must be a number, got {timeout_raw!r}"
                ) from None
        level = (env.get(ENV_LOG_LEVEL) or "INFO").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"{ENV_LOG_LEVEL} must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
            )
        return cls(
            log_dir=env.get(ENV_LOG_DIR) or None,
            log_level=level,
            http_timeout=timeout,
        )


def is_url(ref: str) -> bool:
    return ref.startswith(URL_PREFIXES)
