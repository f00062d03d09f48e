"""Survey server: the FastAPI app that exposes form sessions over HTTP.

Each form session wraps one FormStateStore behind /api/v1/forms, and the
survey schema is served read-only under /api/v1/reference.  Extra
questions come from an HttpQuestionProvider aimed at SURVEY_QUESTIONS_URL
unless a provider is passed to create_app(), which is how tests run
without a network.  Run it with ``survey-server`` or
``uvicorn survey_server.app:app``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from survey_form.config import EnrichmentSettings, load_enrichment_settings
from survey_form.interfaces import QuestionProvider
from survey_form.providers import HttpQuestionProvider
from survey_form.schema import SchemaStore

from survey_server.config import ServerSettings, load_settings
from survey_server.errors import generic_error_handler, value_error_handler
from survey_server.registry import FormSessionRegistry
from survey_server.routes import register_routes

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Lifespan
# ------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load survey.yaml and build the session registry; drain fetches on exit.

    Sessions still open at shutdown are dropped, but any question fetch
    they started is awaited so no task is left pending on the loop.
    """
    settings: ServerSettings = app.state.settings
    enrichment: EnrichmentSettings = app.state.enrichment_settings

    schema_store = SchemaStore(enrichment.schema_path)
    schema_store.load()

    provider: QuestionProvider = app.state.provider or HttpQuestionProvider(enrichment)
    registry = FormSessionRegistry(schema_store, provider, max_sessions=settings.max_sessions)

    app.state.schema_store = schema_store
    app.state.registry = registry
    logger.info("Survey server ready (questions_url=%s)", enrichment.questions_url)

    yield

    await registry.drain()
    logger.info("Pending question fetches drained")


# ------------------------------------------------------------------
# Factory
# ------------------------------------------------------------------

def create_app(
    settings: ServerSettings | None = None,
    enrichment_settings: EnrichmentSettings | None = None,
    provider: QuestionProvider | None = None,
) -> FastAPI:
    """Build the survey server app.

    Settings default to the environment.  Pass *provider* to answer
    question fetches in-process instead of over HTTP.
    """
    if settings is None:
        settings = load_settings()
    if enrichment_settings is None:
        enrichment_settings = load_enrichment_settings()

    # survey_form and survey_server loggers share the server level
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title="Survey Form API Server",
        description="REST API for the topic-driven survey form engine",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.enrichment_settings = enrichment_settings
    app.state.provider = provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    @app.get("/health")
    async def health() -> dict:
        """Liveness check plus the number of open form sessions."""
        return {"status": "ok", "sessions": len(app.state.registry)}

    register_routes(app)

    return app


# ------------------------------------------------------------------
# ASGI app for uvicorn
# ------------------------------------------------------------------
app = create_app()


# ------------------------------------------------------------------
# CLI entry point
# ------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: ``survey-server``."""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "survey_server.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )
