from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .paths import resolve_platform

load_dotenv()  # take environment variables from .env

ENV_PREFIX = 'REPORT_SANITIZER_'


def env_get(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get a REPORT_SANITIZER_* environment variable or return default."""
    return os.getenv(f"{ENV_PREFIX}{key}", default)


@dataclass(frozen=True)
class Settings:
    platform: str
    host: str = '127.0.0.1'
    port: int = 7860
    log_level: str = 'INFO'


def load_settings() -> Settings:
    port = env_get('PORT', '7860')
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {port!r}") from None

    return Settings(
        platform=resolve_platform(env_get('PLATFORM')),
        host=env_get('HOST', '127.0.0.1'),
        port=port_number,
        log_level=(env_get('LOG_LEVEL', 'INFO') or 'INFO').upper(),
    )
