"""SurveyFormPresenter tests — the read-only view and summary lifecycle."""

import pytest

from survey_form.models.form import SubmitAccepted, SubmitRejected
from survey_form.presenter import SurveyFormPresenter


@pytest.fixture
def presenter(form_store):
    return SurveyFormPresenter(form_store)


class TestPresenter:
    def test_initial_view(self, presenter, schema_store):
        assert presenter.view == {"values": schema_store.initial_values(), "errors": {}}
        assert presenter.summary is None

    @pytest.mark.asyncio
    async def test_field_change_reflected_in_view(self, presenter):
        await presenter.on_field_change("fullName", "Ada")
        assert presenter.view["values"]["fullName"] == "Ada"

    @pytest.mark.asyncio
    async def test_rejected_submit_leaves_summary_absent(self, presenter):
        result = await presenter.on_submit_attempt()
        assert isinstance(result, SubmitRejected)
        assert presenter.summary is None
        assert presenter.view["errors"] == result.errors

    @pytest.mark.asyncio
    async def test_accepted_submit_sets_summary(self, presenter, valid_technology_values):
        for name, value in valid_technology_values.items():
            await presenter.on_field_change(name, value)
        result = await presenter.on_submit_attempt()
        assert isinstance(result, SubmitAccepted)
        assert presenter.summary is result.summary
        assert presenter.summary.survey_topic == "Technology"

    @pytest.mark.asyncio
    async def test_later_rejection_keeps_last_summary(self, presenter, valid_technology_values):
        for name, value in valid_technology_values.items():
            await presenter.on_field_change(name, value)
        accepted = await presenter.on_submit_attempt()
        await presenter.on_field_change("email", "nope")
        await presenter.on_submit_attempt()
        assert presenter.summary is accepted.summary

    @pytest.mark.asyncio
    async def test_new_success_replaces_summary(self, presenter, valid_technology_values):
        for name, value in valid_technology_values.items():
            await presenter.on_field_change(name, value)
        first = await presenter.on_submit_attempt()
        await presenter.on_field_change("fullName", "Ada Lovelace")
        second = await presenter.on_submit_attempt()
        assert presenter.summary is second.summary
        assert first.summary["fullName"] == "Ada"

    @pytest.mark.asyncio
    async def test_view_does_not_expose_store_state(self, presenter):
        presenter.view["values"]["fullName"] = "Mallory"
        assert presenter.view["values"]["fullName"] == ""
