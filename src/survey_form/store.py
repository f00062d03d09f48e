"""FormStateStore — owns form values and errors for one form session.

The store is the single writer of FormValues/FormErrors.  Every transition
replaces the whole mapping rather than patching it in place, so readers
never observe a half-applied update.

Transitions:

    change(field, value)  — replace one value; no validation.  A change of
                            the discriminant discards the current additional
                            questions and requests new ones.
    submit()              — validate the base fields plus the active topic
                            group; reject with the full error map, or accept
                            with a fresh Summary and re-request questions.

Values of inactive topic groups are kept when the topic changes, so
switching back restores them.

Usage::

    store = FormStateStore(schema_store, QuestionEnrichmentService(provider))
    await store.change("surveyTopic", "Technology")
    result = await store.submit()
    if result.type == "accepted":
        result.summary.survey_topic
"""

from __future__ import annotations

import logging
from typing import Mapping

from survey_form.constants import DISCRIMINANT_FIELD
from survey_form.enrichment import QuestionEnrichmentService
from survey_form.models.form import FormState, SubmitAccepted, SubmitRejected, SubmitResult
from survey_form.models.question import AdditionalQuestion
from survey_form.resolver import ConditionalSchemaResolver
from survey_form.schema import SchemaStore
from survey_form.summary import SummaryBuilder
from survey_form.validator import ValidationEngine

logger = logging.getLogger(__name__)


class FormStateStore:
    """State container for one survey form session.

    Args:
        schema_store: a loaded :class:`SchemaStore`
        enrichment: the service that owns the additional question list
        defaults: optional initial values, see :meth:`initialize`
    """

    def __init__(
        self,
        schema_store: SchemaStore,
        enrichment: QuestionEnrichmentService,
        defaults: Mapping[str, str] | None = None,
    ) -> None:
        self._schema_store = schema_store
        self._enrichment = enrichment
        self._resolver = ConditionalSchemaResolver(schema_store)
        self._validator = ValidationEngine()
        self._summary_builder = SummaryBuilder()
        self._fields = frozenset(schema_store.all_field_names)
        self._values: dict[str, str] = {}
        self._errors: dict[str, str] = {}
        self.initialize(defaults)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def values(self) -> dict[str, str]:
        """Known fields plus an empty entry per additional question name."""
        values = dict(self._values)
        for q in self._enrichment.questions:
            values.setdefault(q.name, "")
        return values

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def additional_questions(self) -> tuple[AdditionalQuestion, ...]:
        return self._enrichment.questions

    @property
    def state(self) -> FormState:
        return FormState(
            values=self.values,
            errors=self.errors,
            additional_questions=self.additional_questions,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def initialize(self, defaults: Mapping[str, str] | None = None) -> FormState:
        """Reset every known field to ``""`` then apply *defaults*.

        Questions from any earlier topic are discarded.  A non-empty initial
        topic requests its questions straight away, so in that case this
        must run inside the event loop, the same as :meth:`change`.

        Raises:
            ValueError: if *defaults* names a field outside the schema
        """
        values = self._schema_store.initial_values()
        for name, value in (defaults or {}).items():
            self._check_field(name)
            values[name] = value
        self._values = values
        self._errors = {}
        self._enrichment.request(values.get(DISCRIMINANT_FIELD, ""))
        return self.state

    async def change(self, field: str, value: str) -> FormState:
        """Replace one field's value; the last write wins.

        Errors are left untouched.  Changing the discriminant to a new value
        discards the current additional questions and schedules a fetch for
        the new topic without waiting for it.

        Raises:
            ValueError: if *field* is not a schema field
        """
        self._check_field(field)
        previous = self._values.get(field)
        self._values = {**self._values, field: value}

        if field == DISCRIMINANT_FIELD and value != previous:
            generation = self._enrichment.request(value)
            logger.debug("Topic changed %r -> %r (enrichment gen=%d)", previous, value, generation)

        return self.state

    async def submit(self) -> SubmitResult:
        """Validate the active fields and accept or reject the submission.

        The error map is recomputed from scratch on every call.  On
        rejection nothing else happens.  On acceptance errors are cleared,
        a new Summary is built from the current values and questions, and
        the questions for the submitted topic are requested again.
        Resubmitting repeats the whole process against current values.
        """
        values = self.values
        topic = values.get(DISCRIMINANT_FIELD, "")
        group = self._resolver.resolve(topic)
        active = self._schema_store.base_fields + list(group.fields)

        errors = self._validator.validate(values, active)
        if errors:
            self._errors = errors
            logger.info("Submission rejected: %d invalid field(s): %s", len(errors), sorted(errors))
            return SubmitRejected(errors=dict(errors))

        self._errors = {}
        summary = self._summary_builder.build(values, self._enrichment.questions, group)
        self._enrichment.request(topic, discard=False)
        logger.info("Submission accepted for topic=%r", topic)
        return SubmitAccepted(summary=summary)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_field(self, name: str) -> None:
        if name not in self._fields:
            raise ValueError(f"Unknown form field: {name}")
