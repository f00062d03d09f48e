"""ConditionalSchemaResolver — derives the active field set from the topic.

``resolve`` is a total function over discriminant values: the three
``Topic`` members map to their conditional group, anything else (empty,
unset, misspelled) maps to the empty group.  Only the discriminant's
current value matters; earlier values leave no trace.
"""

from __future__ import annotations

from survey_form.constants import Topic
from survey_form.models.schema import ConditionalGroup, FieldSpec
from survey_form.schema import SchemaStore

EMPTY_GROUP = ConditionalGroup()


class ConditionalSchemaResolver:
    """Maps a discriminant value to its conditional group."""

    def __init__(self, store: SchemaStore) -> None:
        self._store = store

    def resolve(self, value: str | None) -> ConditionalGroup:
        topic = Topic.parse(value)
        if topic is None:
            return EMPTY_GROUP
        return self._store.schema.groups.get(topic, EMPTY_GROUP)

    def active_fields(self, value: str | None) -> list[FieldSpec]:
        """Base fields plus the fields of the group selected by *value*."""
        return self._store.base_fields + list(self.resolve(value).fields)
