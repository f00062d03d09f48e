"""SchemaStore — loads the survey form schema YAML into typed models.

This is the single source of truth for field definitions at runtime.  The
store is loaded once at startup and provides field-name lookups for the
resolver, validator, and form store.

Usage::

    store = SchemaStore()           # defaults to the packaged data/survey.yaml
    store.load()

    store.base_field_names          # ["fullName", "email", "surveyTopic", "feedback"]
    store.initial_values()          # every known field -> ""
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from survey_form.models.schema import FieldSpec, FormSchema

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parent / "data" / "survey.yaml"


def load_yaml(path: Path | str) -> Any:
    """Load a single YAML file and return the parsed contents."""
    if isinstance(path, str):
        path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing YAML file: {path}")
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


class SchemaStore:
    """Loads the form schema and provides typed lookup.

    Attributes populated after :meth:`load`:

        schema — the parsed :class:`FormSchema`
    """

    def __init__(self, schema_path: str | Path | None = None) -> None:
        self._path = Path(schema_path) if schema_path else DEFAULT_SCHEMA_PATH
        self._schema: FormSchema | None = None

    def load(self) -> None:
        """Parse the schema YAML.

        Raises ``FileNotFoundError`` if the file is missing and pydantic's
        ``ValidationError`` if its contents do not describe a valid schema.
        """
        raw = load_yaml(self._path)
        groups = {
            topic: {"fields": fields or []}
            for topic, fields in (raw.get("groups") or {}).items()
        }
        self._schema = FormSchema(base_fields=raw["base_fields"], groups=groups)
        logger.info(
            "SchemaStore loaded %s: %d base fields, %d topic groups",
            self._path.name,
            len(self._schema.base_fields),
            len(self._schema.groups),
        )

    @property
    def schema(self) -> FormSchema:
        if self._schema is None:
            raise RuntimeError("SchemaStore.load() has not been called")
        return self._schema

    # ------------------------------------------------------------------
    # Lookup helpers
    # ------------------------------------------------------------------

    @property
    def base_fields(self) -> list[FieldSpec]:
        return list(self.schema.base_fields)

    @property
    def base_field_names(self) -> list[str]:
        return [f.name for f in self.schema.base_fields]

    @property
    def all_field_names(self) -> list[str]:
        """Base fields followed by every group's fields, in YAML order."""
        names = self.base_field_names
        for group in self.schema.groups.values():
            names.extend(group.field_names)
        return names

    def initial_values(self) -> dict[str, str]:
        """Return an empty-string default for every field of the closed set."""
        return {name: "" for name in self.all_field_names}
