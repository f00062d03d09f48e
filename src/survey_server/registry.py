"""FormSessionRegistry — in-memory form sessions keyed by session id.

Nothing is persisted: sessions live for the lifetime of the process and
the oldest one is evicted once ``max_sessions`` is reached.  Each session
gets its own store and enrichment service; the question provider is
shared.
"""

from __future__ import annotations

import logging
from collections import OrderedDict

from survey_form.enrichment import QuestionEnrichmentService
from survey_form.interfaces import QuestionProvider
from survey_form.presenter import SurveyFormPresenter
from survey_form.schema import SchemaStore
from survey_form.store import FormStateStore

logger = logging.getLogger(__name__)


class FormSession:
    """One form session: the store, its enrichment service, and presenter."""

    def __init__(self, session_id: str, store: FormStateStore, enrichment: QuestionEnrichmentService) -> None:
        self.session_id = session_id
        self.store = store
        self.enrichment = enrichment
        self.presenter = SurveyFormPresenter(store)


class FormSessionRegistry:
    def __init__(
        self,
        schema_store: SchemaStore,
        provider: QuestionProvider,
        max_sessions: int = 1000,
    ) -> None:
        self._schema_store = schema_store
        self._provider = provider
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, FormSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, session_id: str, defaults: dict[str, str] | None = None) -> FormSession:
        """Create a session with fresh state.

        Raises:
            ValueError: if the session id is taken or *defaults* names an
                unknown field
        """
        if session_id in self._sessions:
            raise ValueError(f"Form session already exists: {session_id}")

        enrichment = QuestionEnrichmentService(self._provider)
        store = FormStateStore(self._schema_store, enrichment, defaults)
        session = FormSession(session_id, store, enrichment)

        while self._sessions and len(self._sessions) >= self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted form session %s (max_sessions=%d)", evicted, self._max_sessions)
        self._sessions[session_id] = session
        return session

    def get(self, session_id: str) -> FormSession:
        """Raises ``ValueError`` if the session does not exist."""
        session = self._sessions.get(session_id)
        if session is None:
            raise ValueError(f"Form session not found: {session_id}")
        return session

    def delete(self, session_id: str) -> None:
        self.get(session_id)
        del self._sessions[session_id]

    async def drain(self) -> None:
        """Wait for every session's in-flight question fetches."""
        for session in list(self._sessions.values()):
            await session.enrichment.wait()
