"""Abstract interface for the external question provider.

The SDK treats the source of topic-specific questions as an opaque
collaborator.  ``HttpQuestionProvider`` in :mod:`survey_form.providers`
is the bundled implementation; tests substitute in-memory ones.

Typical integration flow::

    provider: QuestionProvider = HttpQuestionProvider(settings)
    service = QuestionEnrichmentService(provider)
    store = FormStateStore(schema_store, service)
"""

from abc import ABC, abstractmethod

from survey_form.models.question import QuestionList


class QuestionProvider(ABC):
    """Interface for fetching extra questions for a survey topic.

    Implementations may raise anything (timeouts, transport errors,
    malformed payloads).  The enrichment service catches every failure
    and degrades to an empty question list.
    """

    @abstractmethod
    async def get_questions(self, topic: str) -> QuestionList:
        """Return the additional questions for *topic*.

        Parameters
        ----------
        topic:
            The current discriminant value, e.g. ``"Technology"``.

        Returns
        -------
        QuestionList
            Envelope holding the question descriptors.
        """
        ...
