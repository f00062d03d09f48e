"""FastAPI dependency injection — provides the schema store and session registry."""

from fastapi import Request

from survey_form.schema import SchemaStore

from survey_server.registry import FormSessionRegistry


def get_registry(request: Request) -> FormSessionRegistry:
    """Return the session registry singleton from ``app.state``."""
    return request.app.state.registry


def get_schema_store(request: Request) -> SchemaStore:
    """Return the SchemaStore singleton from ``app.state``."""
    return request.app.state.schema_store
