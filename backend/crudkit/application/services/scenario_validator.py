"""Scenario-aware attribute binding and validation for domain entities.

Each entity type registers one pydantic schema per scenario (``create``,
``update``, ``filter``...). The schema's fields are the only attributes that
may be assigned from request data in that scenario, and its constraints are the
validation rules applied before the entity is saved.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from crudkit.domain.entities import Entity
from crudkit.domain.exceptions import UnsupportedConfigurationError

logger = logging.getLogger(__name__)


class ScenarioValidator:
    """Binds raw request values onto an entity and validates them per scenario."""

    def __init__(self, entity_type: str, schemas: Mapping[str, type[BaseModel]]):
        self._entity_type = entity_type
        self._schemas = dict(schemas)

    def schema_for(self, scenario: str) -> type[BaseModel]:
        try:
            return self._schemas[scenario]
        except KeyError:
            raise UnsupportedConfigurationError(
                f"{self._entity_type} has no schema for scenario '{scenario}'"
            ) from None

    def safe_attributes(self, scenario: str) -> list[str]:
        """Names of the attributes that may be assigned in the given scenario."""
        return list(self.schema_for(scenario).model_fields)

    def assign(self, entity: Entity, values: Mapping[str, Any]) -> None:
        """Copy submitted values onto the entity, dropping non-allow-listed keys.

        Values are assigned as submitted; ``validate`` coerces them later.
        """
        safe = set(self.safe_attributes(entity.scenario))
        ignored = [name for name in values if name not in safe]
        if ignored:
            logger.debug(
                "Ignoring unsafe %s attributes in scenario '%s': %s",
                self._entity_type, entity.scenario, ", ".join(ignored),
            )
        for name, value in values.items():
            if name in safe:
                setattr(entity, name, value)

    def assign_coerced(self, entity: Entity, values: Mapping[str, Any]) -> None:
        """Copy allow-listed values coerced to their field types.

        Blank values and values that fail coercion are skipped. Nothing is
        validated beyond the field type.
        """
        fields = self.schema_for(entity.scenario).model_fields
        for name, raw in values.items():
            field = fields.get(name)
            if field is None or raw is None or (isinstance(raw, str) and not raw.strip()):
                continue
            try:
                value = TypeAdapter(field.annotation).validate_python(raw)
            except ValidationError:
                logger.debug("Skipping %s.%s: cannot coerce %r", self._entity_type, name, raw)
                continue
            setattr(entity, name, value)

    def validate(self, entity: Entity) -> dict[str, list[str]]:
        """Validate the entity against its scenario schema.

        Returns per-field error messages. On success the coerced values are
        written back onto the entity and an empty dict is returned.
        """
        schema = self.schema_for(entity.scenario)
        data = {name: getattr(entity, name, None) for name in schema.model_fields}
        try:
            validated = schema.model_validate(data)
        except ValidationError as exc:
            return _collect_errors(exc)

        for name, value in validated.model_dump(exclude_none=True).items():
            setattr(entity, name, value)
        return {}

    def criteria(self, entity: Entity) -> dict[str, Any]:
        """Non-blank values of the allow-listed attributes, for searching."""
        criteria: dict[str, Any] = {}
        for name in self.safe_attributes(entity.scenario):
            value = getattr(entity, name, None)
            if value is None or value == "":
                continue
            criteria[name] = value
        return criteria


def _collect_errors(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__all__"
        errors.setdefault(field, []).append(error["msg"])
    return errors
