"""Shared in-memory fakes for the CRUD layers."""

from collections import Counter
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

import pytest

from crudkit.application.interfaces import ArticleRepository
from crudkit.domain.entities import Article


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository that counts every call."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1
        self.calls: Counter[str] = Counter()

    def add(self, title: str, content: str = "...") -> Article:
        """Seed a stored article without counting the call."""
        article = Article(title=title, content=content, id=self._next_id)
        self._next_id += 1
        self._articles[article.id] = article
        return replace(article)

    async def get_by_id(self, article_id: int) -> Article | None:
        self.calls["get_by_id"] += 1
        article = self._articles.get(article_id)
        return replace(article) if article else None

    async def search(self, criteria: Mapping[str, Any]) -> list[Article]:
        self.calls["search"] += 1
        results = []
        for article in self._articles.values():
            matches = True
            for name, value in criteria.items():
                current = getattr(article, name)
                if isinstance(value, str):
                    matches = matches and value.lower() in str(current).lower()
                else:
                    matches = matches and current == value
            if matches:
                results.append(replace(article))
        return results

    async def create(self, article: Article) -> Article:
        self.calls["create"] += 1
        article.id = self._next_id
        self._next_id += 1
        self._articles[article.id] = replace(article)
        return article

    async def update(self, article: Article) -> Article:
        self.calls["update"] += 1
        if article.id not in self._articles:
            raise ValueError(f"Article {article.id} not found")
        self._articles[article.id] = replace(article)
        return article

    async def delete(self, article_id: int) -> bool:
        self.calls["delete"] += 1
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False

    def stored(self) -> list[Article]:
        return list(self._articles.values())


@pytest.fixture
def article_repository() -> FakeArticleRepository:
    return FakeArticleRepository()
