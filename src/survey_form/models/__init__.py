"""Public model re-exports for survey_form.

Consumers should import from ``survey_form.models`` rather than reaching
into sub-modules directly.
"""

# --- Schema ---
from survey_form.models.schema import ConditionalGroup, FieldSpec, FormSchema

# --- Additional questions ---
from survey_form.models.question import AdditionalQuestion, QuestionList

# --- Form state / submission ---
from survey_form.models.form import (
    FormState,
    SubmitAccepted,
    SubmitRejected,
    SubmitResult,
    Summary,
)

__all__ = [
    # Schema
    "ConditionalGroup",
    "FieldSpec",
    "FormSchema",
    # Additional questions
    "AdditionalQuestion",
    "QuestionList",
    # Form
    "FormState",
    "SubmitAccepted",
    "SubmitRejected",
    "SubmitResult",
    "Summary",
]
