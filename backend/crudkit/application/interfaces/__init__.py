from .crud_repository import CrudRepository
from .article_repository import ArticleRepository

__all__ = [
    "CrudRepository",
    "ArticleRepository",
]
