"""Form state and submission models — the contract between store and callers.

  - FormState: read-only view of values, errors, and additional questions
  - Summary: immutable snapshot of accepted data after a successful submit
  - SubmitAccepted / SubmitRejected: outcomes of ``FormStateStore.submit``

The ``SubmitResult`` union covers both outcomes so callers can dispatch
on ``type``.
"""

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from survey_form.constants import DISCRIMINANT_FIELD, Topic
from survey_form.models.question import AdditionalQuestion


class FormState(BaseModel):
    """Snapshot of the store.  Mutating it never affects the store."""

    values: Dict[str, str]
    errors: Dict[str, str] = {}
    additional_questions: Tuple[AdditionalQuestion, ...] = ()


class Summary(BaseModel):
    """Accepted form data captured at the moment of a successful submit.

    ``values`` holds every FormValues field as submitted, including values
    left over from inactive topics.  ``topic_answers`` holds only the active
    group's fields.  ``additional_questions`` carries descriptors only:
    answers to dynamic questions are not part of FormValues, so only their
    labels can be shown.

    Both mappings are read-only views over private copies, so neither the
    caller's input nor later item assignment can change the snapshot.
    """

    model_config = ConfigDict(frozen=True)

    values: Mapping[str, str]
    topic: Optional[Topic] = None
    topic_answers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    additional_questions: Tuple[AdditionalQuestion, ...] = ()
    submitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("values", "topic_answers", mode="after")
    @classmethod
    def _read_only(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_serializer("values", "topic_answers")
    def _dump_mapping(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)

    @property
    def survey_topic(self) -> str:
        return self.values.get(DISCRIMINANT_FIELD, "")

    def __getitem__(self, name: str) -> str:
        return self.values[name]


class SubmitAccepted(BaseModel):
    """Submission passed validation; carries the fresh Summary."""

    type: Literal["accepted"] = "accepted"
    summary: Summary


class SubmitRejected(BaseModel):
    """Submission failed validation; carries the full error map."""

    type: Literal["rejected"] = "rejected"
    errors: Dict[str, str]


# Callers can match on result.type to dispatch rendering logic.
SubmitResult = SubmitAccepted | SubmitRejected
