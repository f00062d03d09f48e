"""SDK configuration — reads settings from environment variables.

All settings have sensible defaults for local development.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class EnrichmentSettings:
    """Immutable question-provider configuration read at startup."""

    # Endpoint queried as GET {questions_url}?topic=<topic>
    questions_url: str = "https://api.example.com/questions"

    # Per-request timeout in seconds
    timeout: float = 10.0

    # Optional override of the packaged schema YAML
    schema_path: str | None = None


def load_enrichment_settings() -> EnrichmentSettings:
    """Build settings from ``SURVEY_*`` environment variables."""
    return EnrichmentSettings(
        questions_url=os.getenv("SURVEY_QUESTIONS_URL", "https://api.example.com/questions"),
        timeout=float(os.getenv("SURVEY_QUESTIONS_TIMEOUT", "10")),
        schema_path=os.getenv("SURVEY_SCHEMA_PATH") or None,
    )
