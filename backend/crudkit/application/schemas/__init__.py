from .article import ArticleCreate, ArticleUpdate, ArticleFilter

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleFilter",
]
