"""HttpQuestionProvider — fetches additional questions over HTTP.

Issues ``GET {questions_url}?topic=<topic>`` and parses the JSON body
``{"questions": [{label, name, type}, ...]}``.  Transport errors, non-2xx
statuses, and malformed bodies all raise; the enrichment service is the
layer that swallows them.
"""

from __future__ import annotations

import logging

import httpx

from survey_form.config import EnrichmentSettings
from survey_form.interfaces import QuestionProvider
from survey_form.models.question import QuestionList

logger = logging.getLogger(__name__)


class HttpQuestionProvider(QuestionProvider):
    """Async httpx-backed QuestionProvider.

    Args:
        settings: endpoint and timeout configuration
        client: optional pre-built ``httpx.AsyncClient`` (tests inject one
            with a ``MockTransport``); when omitted, a client is created per
            request
    """

    def __init__(
        self,
        settings: EnrichmentSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or EnrichmentSettings()
        self._client = client

    async def get_questions(self, topic: str) -> QuestionList:
        if self._client is not None:
            return await self._get(self._client, topic)
        async with httpx.AsyncClient(timeout=self._settings.timeout) as client:
            return await self._get(client, topic)

    async def _get(self, client: httpx.AsyncClient, topic: str) -> QuestionList:
        logger.debug("GET %s topic=%s", self._settings.questions_url, topic)
        resp = await client.get(self._settings.questions_url, params={"topic": topic})
        resp.raise_for_status()
        return QuestionList.model_validate(resp.json())
