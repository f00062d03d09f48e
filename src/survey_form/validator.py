"""ValidationEngine — evaluates field rules against form values.

Every field in the active set is checked on every call; a failure in one
field never stops the others from being checked.  Fields outside the
active set are never looked at, whatever their stored value.

Rules per ``FieldSpec.check``:

  - **required** (all fields with ``required=True``): non-empty after trimming
  - **email**: ``local@domain.tld`` shape
  - **topic**: one of the ``Topic`` values
  - **non_negative_number**: parses as a finite number >= 0

The result is always a fresh dict; valid fields are absent from it.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Mapping

from survey_form.constants import EMAIL_PATTERN, ERROR_MESSAGES, Topic
from survey_form.models.schema import FieldSpec

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Pure validator: (values, active fields) -> field error messages."""

    def validate(
        self,
        values: Mapping[str, str],
        active_fields: Iterable[FieldSpec],
    ) -> dict[str, str]:
        """Check every active field and collect one message per failure.

        Args:
            values: current form values keyed by field name; missing keys
                    are treated as empty strings
            active_fields: the base fields plus the active topic group

        Returns:
            Mapping of field name to error message, empty when all pass.
        """
        errors: dict[str, str] = {}
        for spec in active_fields:
            message = self.check_field(spec, values.get(spec.name) or "")
            if message is not None:
                errors[spec.name] = message
        return errors

    def check_field(self, spec: FieldSpec, raw: str) -> str | None:
        """Return the error message for one field, or None when it is valid."""
        value = raw.strip()
        if not value:
            if spec.required:
                return self._message("required", spec)
            return None

        check = spec.check
        if check == "text":
            return None
        elif check == "email":
            ok = bool(EMAIL_PATTERN.match(value))
        elif check == "topic":
            ok = Topic.parse(value) is not None
        elif check == "non_negative_number":
            ok = self._is_non_negative_number(value)
        else:
            logger.warning("Unknown check kind %r on field %s", check, spec.name)
            return None

        return None if ok else self._message(check, spec)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _is_non_negative_number(value: str) -> bool:
        try:
            number = float(value)
        except ValueError:
            return False
        return math.isfinite(number) and number >= 0

    @staticmethod
    def _message(kind: str, spec: FieldSpec) -> str:
        return ERROR_MESSAGES[kind].format(label=spec.label)
