"""Generic CrudRepository implementation backed by SQLAlchemy."""

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crudkit.application.interfaces import CrudRepository
from crudkit.domain.entities import Entity
from crudkit.domain.exceptions import PersistenceError
from crudkit.infrastructure.database.base import Base

E = TypeVar("E", bound=Entity)
M = TypeVar("M", bound=Base)


class SQLAlchemyCrudRepository(CrudRepository[E], Generic[E, M]):
    """Maps one domain entity type onto one ORM model using async sessions.

    Subclasses provide the model class and the two mapping directions.
    """

    model_cls: ClassVar[type[Base]]

    def __init__(self, session: AsyncSession):
        self._session = session

    @abstractmethod
    def _to_entity(self, model: M) -> E:
        """Map ORM model → domain entity."""

    @abstractmethod
    def _apply(self, entity: E, model: M) -> None:
        """Copy the entity's editable fields onto the ORM model."""

    @abstractmethod
    def _refresh(self, entity: E, model: M) -> None:
        """Copy storage-generated values (keys, timestamps) back onto the entity."""

    def _ordering(self) -> tuple[Any, ...]:
        return ()

    def _integrity_error(self, entity: E, exc: IntegrityError) -> PersistenceError:
        return PersistenceError(f"Could not save {entity.type_name()}: {exc.orig}")

    async def get_by_id(self, entity_id: Any) -> E | None:
        result = await self._session.get(self.model_cls, entity_id)
        return self._to_entity(result) if result else None

    async def search(self, criteria: Mapping[str, Any]) -> list[E]:
        stmt = select(self.model_cls)
        for name, value in criteria.items():
            column = getattr(self.model_cls, name)
            if isinstance(value, str):
                stmt = stmt.where(column.ilike(f"%{value}%"))
            else:
                stmt = stmt.where(column == value)
        stmt = stmt.order_by(*self._ordering())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, entity: E) -> E:
        model = self.model_cls()
        self._apply(entity, model)
        self._session.add(model)
        await self._flush(entity)
        self._refresh(entity, model)
        return entity

    async def update(self, entity: E) -> E:
        model = await self._session.get(self.model_cls, entity.key)
        if model is None:
            raise PersistenceError(f"{entity.type_name()} {entity.key} not found in database")
        self._apply(entity, model)
        await self._flush(entity)
        self._refresh(entity, model)
        return entity

    async def delete(self, entity_id: Any) -> bool:
        model = await self._session.get(self.model_cls, entity_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _flush(self, entity: E) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # The failed flush leaves the transaction unusable.
            await self._session.rollback()
            raise self._integrity_error(entity, exc) from exc
