from .base import Entity
from .article import Article

__all__ = [
    "Entity",
    "Article",
]
