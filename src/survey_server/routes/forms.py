"""Form session endpoints — create, view, change fields, submit.

A rejected submission is a normal ``200`` response with
``{"type": "rejected", "errors": {...}}``; HTTP errors are reserved for
unknown sessions, duplicate sessions, and unknown field names.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from survey_form.models.form import FormState, SubmitResult, Summary
from survey_form.models.question import AdditionalQuestion

from survey_server.dependencies import get_registry
from survey_server.registry import FormSession, FormSessionRegistry

router = APIRouter(tags=["forms"])


# ------------------------------------------------------------------
# Request / response models
# ------------------------------------------------------------------

class CreateFormRequest(BaseModel):
    """Body for POST /forms."""
    session_id: str
    defaults: dict[str, str] | None = None


class FieldChangeRequest(BaseModel):
    """Body for PATCH /forms/{session_id}/fields/{name}."""
    value: str


class FormView(BaseModel):
    """Everything a renderer needs for one session."""
    values: dict[str, str]
    errors: dict[str, str]
    additional_questions: list[AdditionalQuestion]
    summary: Summary | None = None


def _view(session: FormSession) -> FormView:
    presenter = session.presenter
    return FormView(
        **presenter.view,
        additional_questions=list(presenter.additional_questions),
        summary=presenter.summary,
    )


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.post("/forms", status_code=201)
async def create_form(
    body: CreateFormRequest,
    registry: FormSessionRegistry = Depends(get_registry),
) -> FormState:
    """Create a new form session.  Raises 409 if the id is taken."""
    session = registry.create(body.session_id, body.defaults)
    return session.store.state


@router.get("/forms/{session_id}")
async def get_form(
    session_id: str,
    registry: FormSessionRegistry = Depends(get_registry),
) -> FormView:
    """Return values, errors, additional questions, and the latest summary."""
    return _view(registry.get(session_id))


@router.patch("/forms/{session_id}/fields/{name}")
async def change_field(
    session_id: str,
    name: str,
    body: FieldChangeRequest,
    registry: FormSessionRegistry = Depends(get_registry),
) -> FormState:
    """Replace one field's value.  Raises 400 for unknown field names."""
    session = registry.get(session_id)
    await session.presenter.on_field_change(name, body.value)
    return session.store.state


@router.post("/forms/{session_id}/submit")
async def submit_form(
    session_id: str,
    registry: FormSessionRegistry = Depends(get_registry),
) -> SubmitResult:
    """Validate and submit the form."""
    session = registry.get(session_id)
    return await session.presenter.on_submit_attempt()


@router.delete("/forms/{session_id}", status_code=204)
async def delete_form(
    session_id: str,
    registry: FormSessionRegistry = Depends(get_registry),
) -> None:
    """Discard a form session."""
    registry.delete(session_id)
