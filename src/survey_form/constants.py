"""Survey form constants shared across the SDK.

These values are referenced by the resolver, validator, and store.  They
mirror conventions encoded in the packaged ``data/survey.yaml`` schema.
"""

import re
from enum import Enum

# The single field whose value selects the active conditional group.
DISCRIMINANT_FIELD = "surveyTopic"


class Topic(str, Enum):
    """Enumerated discriminant values.

    Each member keys exactly one conditional group in the form schema.
    """

    TECHNOLOGY = "Technology"
    HEALTH = "Health"
    EDUCATION = "Education"

    @classmethod
    def parse(cls, value: str | None) -> "Topic | None":
        """Return the matching member, or None for empty/unknown values."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# local@domain.tld with no whitespace and exactly one "@".
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Human-readable messages per check kind.  ``{label}`` is the field label.
ERROR_MESSAGES: dict[str, str] = {
    "required": "{label} is required",
    "email": "Email address is invalid",
    "topic": "Please select a valid survey topic",
    "non_negative_number": "{label} must be a non-negative number",
}
