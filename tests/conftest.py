import pytest

from survey_form.enrichment import QuestionEnrichmentService
from survey_form.schema import SchemaStore
from survey_form.store import FormStateStore

from helpers.providers import StaticQuestionProvider


@pytest.fixture(scope="session")
def schema_store():
    """Load the packaged form schema once for the entire test session."""
    s = SchemaStore()
    s.load()
    return s


@pytest.fixture
def valid_technology_values():
    """A complete, valid Technology submission."""
    return {
        "fullName": "Ada",
        "email": "ada@example.com",
        "surveyTopic": "Technology",
        "favoriteProgrammingLanguage": "Python",
        "yearsOfExperience": "5",
        "feedback": "Great",
    }


@pytest.fixture
def provider():
    return StaticQuestionProvider()


@pytest.fixture
def form_store(schema_store, provider):
    """FormStateStore backed by an in-memory provider."""
    return FormStateStore(schema_store, QuestionEnrichmentService(provider))
