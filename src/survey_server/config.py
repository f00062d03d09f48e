"""Survey server settings, read once from ``SERVER_*`` environment variables.

The question provider has its own ``SURVEY_*`` settings in
:mod:`survey_form.config`; this module covers only the HTTP process and
the in-memory form session registry.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ServerSettings:
    """Bind address, CORS origins, log level, and the session cap."""

    host: str = "0.0.0.0"
    port: int = 8080

    # SERVER_CORS_ORIGINS is comma-separated; "*" allows any origin
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    log_level: str = "INFO"

    # Form sessions are kept in memory only; the oldest is evicted past this.
    max_sessions: int = 1000


def load_settings() -> ServerSettings:
    """Build settings from ``SERVER_*`` environment variables.

    Raises:
        ValueError: if ``SERVER_MAX_SESSIONS`` is not a positive integer
    """
    raw_origins = os.getenv("SERVER_CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]

    max_sessions = int(os.getenv("SERVER_MAX_SESSIONS", "1000"))
    if max_sessions < 1:
        raise ValueError(f"SERVER_MAX_SESSIONS must be at least 1, got {max_sessions}")

    return ServerSettings(
        host=os.getenv("SERVER_HOST", "0.0.0.0"),
        port=int(os.getenv("SERVER_PORT", "8080")),
        cors_origins=origins,
        log_level=os.getenv("SERVER_LOG_LEVEL", "INFO").upper(),
        max_sessions=max_sessions,
    )
