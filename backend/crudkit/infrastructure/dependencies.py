"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from crudkit.config import get_settings
from crudkit.application.services import ArticleService
from crudkit.infrastructure.database.session import get_db_session
from crudkit.infrastructure.database.repositories import SQLAlchemyArticleRepository


@lru_cache
def get_templates() -> Jinja2Templates:
    """Shared Jinja2 environment for every CRUD controller's views."""
    return Jinja2Templates(directory=get_settings().templates_dir)


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)
