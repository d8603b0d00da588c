"""Runtime settings for the transactions API.

The only tunable is the list of browser origins allowed by CORS. A local
``.env`` file, when present, is read before the process environment is
consulted.
"""

from __future__ import annotations

import os
import logging
from dataclasses import dataclass, field

from dotenv import load_dotenv


logger = logging.getLogger(__name__)

load_dotenv()

CORS_ALLOW_ORIGINS_ENV = "CORS_ALLOW_ORIGINS"
DEFAULT_CORS_ALLOW_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")


def _split_origins(raw_value: str) -> list[str]:
    return [origin.strip() for origin in raw_value.split(",") if origin.strip()]


@dataclass(slots=True)
class ApiSettings:
    cors_allow_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ALLOW_ORIGINS))

    @classmethod
    def from_env(cls) -> ApiSettings:
        """Build settings from the environment, falling back to local dev origins."""
        raw_value = os.getenv(CORS_ALLOW_ORIGINS_ENV)
        if raw_value is None:
            return cls()

        origins = _split_origins(raw_value)
        if not origins:
            logger.warning("cors_allow_origins_blank env=%s; cross-origin requests disabled", CORS_ALLOW_ORIGINS_ENV)
        return cls(cors_allow_origins=origins)
