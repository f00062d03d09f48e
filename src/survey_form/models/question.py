"""Additional question models — topic-specific questions from a provider.

The provider's wire format is ``{"questions": [{label, name, type}, ...]}``.
``type`` is exposed as ``input_type`` on the model so it does not shadow
the builtin; both names are accepted when parsing.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class AdditionalQuestion(BaseModel):
    """A topic-specific question descriptor sourced from a QuestionProvider."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str
    name: str
    input_type: str = Field(default="text", alias="type")


class QuestionList(BaseModel):
    """Provider response envelope."""

    questions: List[AdditionalQuestion] = []
