"""Client settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_SERVER_URL = "http://localhost:8080"


@dataclass(frozen=True)
class ClientSettings:
    """Where the engine lives and how the client presents itself."""

    server_url: str = DEFAULT_SERVER_URL
    language: str = "English"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientSettings:
        """Read ``SANTORINI_*`` overrides from the environment."""
        env = os.environ if environ is None else environ
        return cls(
            server_url=env.get("SANTORINI_SERVER_URL", DEFAULT_SERVER_URL).strip()
            or DEFAULT_SERVER_URL,
            language=env.get("SANTORINI_LANGUAGE", "English"),
            log_level=env.get("SANTORINI_LOG_LEVEL", "INFO").upper(),
        )
