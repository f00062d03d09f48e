"""QuestionEnrichmentService — fetches topic-specific extra questions.

The service wraps a :class:`QuestionProvider` and owns the current list
of additional questions.  Two properties hold regardless of what the
provider does:

  1. **Failures never escape.**  Timeouts, transport errors, and malformed
     payloads are logged and turned into an empty list.  No retries.
  2. **Only the newest request commits.**  Each :meth:`request` bumps a
     generation counter; a fetch that finishes after a newer request was
     issued is dropped instead of overwriting fresher results.

Fetches run as asyncio tasks, so callers are never blocked waiting for
the provider.  In-flight fetches are not cancelled when superseded; their
results are simply ignored.

Usage::

    service = QuestionEnrichmentService(provider)
    service.request("Technology")   # returns immediately
    await service.wait()            # tests / shutdown only
    service.questions               # tuple of AdditionalQuestion
"""

from __future__ import annotations

import asyncio
import logging

from survey_form.interfaces import QuestionProvider
from survey_form.models.question import AdditionalQuestion, QuestionList

logger = logging.getLogger(__name__)


class QuestionEnrichmentService:
    """Fetches additional questions and keeps the newest successful result."""

    def __init__(self, provider: QuestionProvider) -> None:
        self._provider = provider
        self._generation = 0
        self._questions: tuple[AdditionalQuestion, ...] = ()
        self._tasks: set[asyncio.Task] = set()

    @property
    def questions(self) -> tuple[AdditionalQuestion, ...]:
        """The last committed question list (replaced wholesale, never merged)."""
        return self._questions

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def pending(self) -> int:
        """Number of fetches still in flight."""
        return len(self._tasks)

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def fetch(self, topic: str) -> list[AdditionalQuestion]:
        """Ask the provider for *topic*'s questions; [] on any failure.

        The provider's result is re-validated, so a ``QuestionList``, a raw
        ``{"questions": [...]}`` dict, or anything malformed all end here.
        """
        try:
            result = await self._provider.get_questions(topic)
            return list(QuestionList.model_validate(result).questions)
        except Exception as exc:
            logger.warning("Question fetch failed for topic=%r: %s", topic, exc)
            return []

    def request(self, topic: str, *, discard: bool = True) -> int:
        """Issue a new generation and schedule a fetch for *topic*.

        Must be called from a running event loop.  With ``discard=True``
        the current list is dropped immediately, before the new fetch
        resolves.  An empty topic issues no fetch; it only invalidates
        whatever is in flight.

        Returns:
            The generation number assigned to this request.
        """
        self._generation += 1
        generation = self._generation
        if discard:
            self._questions = ()

        if not topic:
            logger.debug("Enrichment gen=%d: empty topic, nothing to fetch", generation)
            return generation

        task = asyncio.get_running_loop().create_task(self._run(generation, topic))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return generation

    async def wait(self) -> None:
        """Wait until no fetch is in flight."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    async def _run(self, generation: int, topic: str) -> None:
        questions = await self.fetch(topic)
        if generation != self._generation:
            logger.debug(
                "Dropping stale questions for topic=%r (gen=%d, current=%d)",
                topic, generation, self._generation,
            )
            return
        self._questions = tuple(questions)
        logger.info(
            "Committed %d additional questions for topic=%r (gen=%d)",
            len(questions), topic, generation,
        )
