"""Generic repository port shared by every CRUD-managed entity."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from crudkit.domain.entities import Entity

E = TypeVar("E", bound=Entity)


class CrudRepository(ABC, Generic[E]):
    """Port for entity persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, entity_id: Any) -> E | None:
        """Retrieve a single entity by its primary key."""
        ...

    @abstractmethod
    async def search(self, criteria: Mapping[str, Any]) -> list[E]:
        """Retrieve every entity matching the given field criteria.

        String criteria match case-insensitively as substrings, anything else
        matches by equality.
        """
        ...

    @abstractmethod
    async def create(self, entity: E) -> E:
        """Persist a new entity, assign its generated key and return it."""
        ...

    @abstractmethod
    async def update(self, entity: E) -> E:
        """Update an existing entity."""
        ...

    @abstractmethod
    async def delete(self, entity_id: Any) -> bool:
        """Delete an entity. Returns True if deleted, False if not found."""
        ...
