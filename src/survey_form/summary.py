"""SummaryBuilder — projects accepted form data into an immutable Summary."""

from __future__ import annotations

from typing import Iterable, Mapping

from survey_form.constants import DISCRIMINANT_FIELD, Topic
from survey_form.models.form import Summary
from survey_form.models.question import AdditionalQuestion
from survey_form.models.schema import ConditionalGroup


class SummaryBuilder:
    """Builds a fresh :class:`Summary` per successful submission."""

    def build(
        self,
        values: Mapping[str, str],
        additional_questions: Iterable[AdditionalQuestion],
        group: ConditionalGroup | None = None,
    ) -> Summary:
        """Copy every value plus the question descriptors.

        ``group`` is the active conditional group; its fields form the
        summary's topic-specific section.  Answers to additional questions
        are not captured, only their descriptors.
        """
        snapshot = dict(values)
        topic = group.topic if group is not None else Topic.parse(snapshot.get(DISCRIMINANT_FIELD))
        topic_answers = (
            {name: snapshot.get(name, "") for name in group.field_names}
            if group is not None
            else {}
        )
        return Summary(
            values=snapshot,
            topic=topic,
            topic_answers=topic_answers,
            additional_questions=tuple(additional_questions),
        )
