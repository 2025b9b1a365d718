from .article_controller import ArticleController, router as article_router

__all__ = [
    "ArticleController",
    "article_router",
]
