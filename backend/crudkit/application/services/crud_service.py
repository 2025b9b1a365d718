"""Generic application service (use case) for CRUD-managed entities."""

import logging
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from crudkit.application.interfaces import CrudRepository
from crudkit.application.services.scenario_validator import ScenarioValidator
from crudkit.domain.entities import Entity
from crudkit.domain.exceptions import EntityNotFoundError, EntityValidationError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class CrudService(Generic[E]):
    """Finds, searches, saves and deletes one entity type.

    Depends on the repository port (DI) and a scenario validator.
    """

    def __init__(
        self,
        entity_type: type[E],
        repository: CrudRepository[E],
        validator: ScenarioValidator,
    ):
        self._entity_type = entity_type
        self._repository = repository
        self._validator = validator
        self._key_adapter = TypeAdapter(entity_type.key_type)

    @property
    def entity_type(self) -> type[E]:
        return self._entity_type

    @property
    def validator(self) -> ScenarioValidator:
        return self._validator

    async def find(self, key: Any) -> E | None:
        """Look an entity up by a raw (request supplied) key.

        A key that cannot be coerced to the entity's key type matches nothing.
        """
        try:
            entity_id = self._key_adapter.validate_python(key)
        except ValidationError:
            logger.debug("Invalid %s key %r", self._entity_type.type_name(), key)
            return None
        return await self._repository.get_by_id(entity_id)

    async def search(self, filter_entity: Entity) -> list[E]:
        criteria = self._validator.criteria(filter_entity)
        return await self._repository.search(criteria)

    async def save(self, entity: E) -> E:
        """Validate and persist the entity, inserting or updating as needed.

        Raises EntityValidationError when the scenario rules fail; storage
        failures surface as PersistenceError from the repository.
        """
        errors = self._validator.validate(entity)
        if errors:
            raise EntityValidationError(self._entity_type.type_name(), errors)

        if entity.is_new:
            saved = await self._repository.create(entity)
            logger.info("Created %s %s", self._entity_type.type_name(), saved.key)
        else:
            saved = await self._repository.update(entity)
            logger.info("Updated %s %s", self._entity_type.type_name(), saved.key)
        return saved

    async def delete(self, entity: E) -> None:
        deleted = await self._repository.delete(entity.key)
        if not deleted:
            raise EntityNotFoundError(self._entity_type.type_name(), entity.key)
        logger.info("Deleted %s %s", self._entity_type.type_name(), entity.key)
