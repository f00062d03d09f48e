"""SurveyFormPresenter — the boundary exposed to a rendering layer.

A renderer sees a read-only ``view`` ({values, errors}), the current
additional questions, and the latest ``summary``, and drives the form
through two operations: ``on_field_change`` and ``on_submit_attempt``.

The presenter, not the store, holds the Summary: it is ``None`` until
the first successful submission and is replaced by each later one.
"""

from __future__ import annotations

from survey_form.models.form import SubmitAccepted, SubmitResult, Summary
from survey_form.models.question import AdditionalQuestion
from survey_form.store import FormStateStore


class SurveyFormPresenter:
    def __init__(self, store: FormStateStore) -> None:
        self._store = store
        self._summary: Summary | None = None

    @property
    def view(self) -> dict[str, dict[str, str]]:
        return {"values": self._store.values, "errors": self._store.errors}

    @property
    def additional_questions(self) -> tuple[AdditionalQuestion, ...]:
        return self._store.additional_questions

    @property
    def summary(self) -> Summary | None:
        return self._summary

    async def on_field_change(self, name: str, value: str) -> None:
        await self._store.change(name, value)

    async def on_submit_attempt(self) -> SubmitResult:
        result = await self._store.submit()
        if isinstance(result, SubmitAccepted):
            self._summary = result.summary
        return result
