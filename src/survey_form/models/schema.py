"""Pydantic models for the survey form schema.

These models mirror ``data/survey.yaml``:

  - FieldSpec: one form field with its label, input type, and check kind
  - ConditionalGroup: the extra fields owned by one survey topic
  - FormSchema: base fields plus one conditional group per topic

Field visibility is keyed by the ``Topic`` enum rather than by comparing
raw strings, so each topic carries its own typed list of fields.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, model_validator

from survey_form.constants import Topic


class FieldSpec(BaseModel):
    """A single form field.

    ``check`` names the rule applied on top of ``required``:

      - text: nothing beyond required
      - email: must look like ``local@domain``
      - topic: must be one of the ``Topic`` values
      - non_negative_number: must parse as a finite number >= 0
    """

    name: str
    label: str
    input_type: str = "text"
    required: bool = True
    check: Literal["text", "email", "topic", "non_negative_number"] = "text"
    # Display choices for select inputs; not enforced by validation.
    options: Optional[List[str]] = None


class ConditionalGroup(BaseModel):
    """Fields activated by one discriminant value.

    The empty group (``topic=None``, no fields) is what unknown or unset
    topics resolve to.
    """

    topic: Optional[Topic] = None
    fields: List[FieldSpec] = []

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    @property
    def required(self) -> Dict[str, bool]:
        """Mapping of field name to required-ness."""
        return {f.name: f.required for f in self.fields}

    @property
    def is_empty(self) -> bool:
        return not self.fields


class FormSchema(BaseModel):
    """The complete survey schema: always-active base fields plus groups."""

    base_fields: List[FieldSpec]
    groups: Dict[Topic, ConditionalGroup] = {}

    @model_validator(mode="after")
    def _chk(self):
        seen: set[str] = set()
        for f in self.base_fields:
            if f.name in seen:
                raise ValueError(f"duplicate field name: {f.name}")
            seen.add(f.name)
        for topic, group in self.groups.items():
            if group.topic is not None and group.topic != topic:
                raise ValueError(
                    f"group keyed by {topic.value} declares topic {group.topic.value}"
                )
            group.topic = topic
            for f in group.fields:
                if f.name in seen:
                    raise ValueError(f"duplicate field name: {f.name}")
                seen.add(f.name)
        return self
