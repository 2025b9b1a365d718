"""Concrete repository implementation backed by SQLAlchemy."""

from typing import Any

from sqlalchemy.exc import IntegrityError

from crudkit.application.interfaces import ArticleRepository
from crudkit.domain.entities import Article
from crudkit.domain.exceptions import DuplicateEntityError, PersistenceError
from crudkit.infrastructure.database.models import ArticleModel
from crudkit.infrastructure.database.repositories.crud_repository import SQLAlchemyCrudRepository


class SQLAlchemyArticleRepository(SQLAlchemyCrudRepository[Article, ArticleModel], ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    model_cls = ArticleModel

    def _to_entity(self, model: ArticleModel) -> Article:
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _apply(self, entity: Article, model: ArticleModel) -> None:
        model.title = entity.title
        model.content = entity.content

    def _refresh(self, entity: Article, model: ArticleModel) -> None:
        entity.id = model.id
        entity.created_at = model.created_at
        entity.updated_at = model.updated_at

    def _ordering(self) -> tuple[Any, ...]:
        return (ArticleModel.created_at.desc(), ArticleModel.id.desc())

    def _integrity_error(self, entity: Article, exc: IntegrityError) -> PersistenceError:
        # title is the only unique column besides the key
        return DuplicateEntityError("Article", "title", entity.title)
