"""Pydantic schemas for the Article feature, one per validation scenario."""

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Rules applied when a new article is saved."""

    model_config = {"str_strip_whitespace": True}

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    content: str = Field(..., min_length=1, examples=["This is a knowledge base article."])


class ArticleUpdate(BaseModel):
    """Rules applied when an existing article is saved."""

    model_config = {"str_strip_whitespace": True}

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)


class ArticleFilter(BaseModel):
    """Fields that may be used to filter the article list."""

    id: int | None = None
    title: str | None = None
    content: str | None = None
