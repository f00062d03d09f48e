"""HttpQuestionProvider tests using httpx.MockTransport — no network."""

import httpx
import pytest
from pydantic import ValidationError

from survey_form.config import EnrichmentSettings
from survey_form.enrichment import QuestionEnrichmentService
from survey_form.providers import HttpQuestionProvider

URL = "https://questions.test/api/questions"


def _provider(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpQuestionProvider(EnrichmentSettings(questions_url=URL), client=client)


class TestHttpQuestionProvider:
    @pytest.mark.asyncio
    async def test_sends_topic_query_parameter(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"questions": []})

        await _provider(handler).get_questions("Education")
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert seen[0].url.params["topic"] == "Education"
        assert str(seen[0].url).startswith(URL)

    @pytest.mark.asyncio
    async def test_parses_wire_format(self):
        def handler(request):
            return httpx.Response(200, json={"questions": [
                {"label": "Preferred IDE", "name": "preferredIde", "type": "text"},
                {"label": "Team size", "name": "teamSize", "type": "number"},
            ]})

        result = await _provider(handler).get_questions("Technology")
        assert [q.name for q in result.questions] == ["preferredIde", "teamSize"]
        assert result.questions[1].input_type == "number"

    @pytest.mark.asyncio
    async def test_http_error_status_raises(self):
        provider = _provider(lambda request: httpx.Response(503))
        with pytest.raises(httpx.HTTPStatusError):
            await provider.get_questions("Health")

    @pytest.mark.asyncio
    async def test_malformed_body_raises(self):
        provider = _provider(lambda request: httpx.Response(200, json={"questions": [{"label": "x"}]}))
        with pytest.raises(ValidationError):
            await provider.get_questions("Health")


class TestProviderThroughEnrichment:
    """Every provider failure mode ends as an empty list in the service."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "handler",
        [
            lambda request: httpx.Response(500),
            lambda request: httpx.Response(200, text="not json"),
            lambda request: httpx.Response(200, json={"questions": "nope"}),
        ],
    )
    async def test_degrades_to_empty(self, handler):
        service = QuestionEnrichmentService(_provider(handler))
        assert await service.fetch("Health") == []

    @pytest.mark.asyncio
    async def test_transport_error_degrades_to_empty(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        service = QuestionEnrichmentService(_provider(handler))
        service.request("Technology")
        await service.wait()
        assert service.questions == ()
