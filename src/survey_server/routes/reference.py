"""Reference data endpoints — expose the loaded form schema."""

from fastapi import APIRouter, Depends

from survey_form.constants import Topic
from survey_form.models.schema import ConditionalGroup, FormSchema
from survey_form.resolver import ConditionalSchemaResolver
from survey_form.schema import SchemaStore

from survey_server.dependencies import get_schema_store

router = APIRouter(tags=["reference"])


@router.get("/reference/schema")
async def get_schema(store: SchemaStore = Depends(get_schema_store)) -> FormSchema:
    """Return the full form schema (base fields and topic groups)."""
    return store.schema


@router.get("/reference/topics")
async def list_topics() -> list[str]:
    return [t.value for t in Topic]


@router.get("/reference/groups/{topic}")
async def get_group(topic: str, store: SchemaStore = Depends(get_schema_store)) -> ConditionalGroup:
    """Resolve a topic to its field group; unknown topics give the empty group."""
    return ConditionalSchemaResolver(store).resolve(topic)
