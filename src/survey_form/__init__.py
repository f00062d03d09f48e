"""survey_form — topic-driven survey form engine.

Public API:
    FormStateStore            — owns values/errors; change and submit transitions
    SurveyFormPresenter       — read-only view plus change/submit for renderers
    SchemaStore               — loads the form schema YAML into typed models
    ConditionalSchemaResolver — maps the survey topic to its field group
    ValidationEngine          — pure field-rule validation
    SummaryBuilder            — builds the post-submit Summary snapshot
    Topic                     — enumerated survey topics

Enrichment:
    QuestionProvider          — ABC for the external question source
    HttpQuestionProvider      — httpx implementation of QuestionProvider
    QuestionEnrichmentService — failure-tolerant, generation-sequenced fetches
"""

from survey_form.config import EnrichmentSettings, load_enrichment_settings
from survey_form.constants import DISCRIMINANT_FIELD, Topic
from survey_form.enrichment import QuestionEnrichmentService
from survey_form.interfaces import QuestionProvider
from survey_form.models import (
    AdditionalQuestion,
    ConditionalGroup,
    FieldSpec,
    FormSchema,
    FormState,
    QuestionList,
    SubmitAccepted,
    SubmitRejected,
    SubmitResult,
    Summary,
)
from survey_form.presenter import SurveyFormPresenter
from survey_form.providers import HttpQuestionProvider
from survey_form.resolver import ConditionalSchemaResolver
from survey_form.schema import SchemaStore
from survey_form.store import FormStateStore
from survey_form.summary import SummaryBuilder
from survey_form.validator import ValidationEngine

__all__ = [
    # Engine & store
    "FormStateStore",
    "SurveyFormPresenter",
    "SchemaStore",
    "ConditionalSchemaResolver",
    "ValidationEngine",
    "SummaryBuilder",
    # Constants / config
    "DISCRIMINANT_FIELD",
    "Topic",
    "EnrichmentSettings",
    "load_enrichment_settings",
    # Enrichment
    "QuestionProvider",
    "HttpQuestionProvider",
    "QuestionEnrichmentService",
    # Models
    "AdditionalQuestion",
    "ConditionalGroup",
    "FieldSpec",
    "FormSchema",
    "FormState",
    "QuestionList",
    "SubmitAccepted",
    "SubmitRejected",
    "SubmitResult",
    "Summary",
]
