from .crud_repository import SQLAlchemyCrudRepository
from .article_repository import SQLAlchemyArticleRepository

__all__ = [
    "SQLAlchemyCrudRepository",
    "SQLAlchemyArticleRepository",
]
