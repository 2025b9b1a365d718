"""Unit tests for the ArticleService (generic CrudService)."""

import pytest

from crudkit.application.services import ArticleService
from crudkit.domain.entities import Article
from crudkit.domain.exceptions import EntityNotFoundError, EntityValidationError


@pytest.fixture
def service(article_repository) -> ArticleService:
    return ArticleService(article_repository)


def _new_article(title: str, content: str) -> Article:
    article = Article(title=title, content=content)
    article.scenario = "create"
    return article


@pytest.mark.asyncio
async def test_save_new_article_assigns_id(service: ArticleService, article_repository):
    article = await service.save(_new_article("Test Article", "Some content"))
    assert article.id is not None
    assert article.is_new is False
    assert article_repository.calls["create"] == 1
    assert article_repository.calls["update"] == 0


@pytest.mark.asyncio
async def test_save_existing_article_updates(service: ArticleService, article_repository):
    stored = article_repository.add("Old", "Old content")
    article = await service.find(stored.id)
    article.scenario = "update"
    article.title = "New"

    await service.save(article)

    assert article_repository.calls["update"] == 1
    assert article_repository.stored()[0].title == "New"
    assert article_repository.stored()[0].content == "Old content"


@pytest.mark.asyncio
async def test_save_invalid_article_raises_without_persisting(service: ArticleService, article_repository):
    with pytest.raises(EntityValidationError) as exc_info:
        await service.save(_new_article("", "Some content"))

    assert "title" in exc_info.value.errors
    assert article_repository.calls["create"] == 0


@pytest.mark.asyncio
async def test_find_coerces_string_keys(service: ArticleService, article_repository):
    stored = article_repository.add("A1")
    found = await service.find(str(stored.id))
    assert found is not None
    assert found.title == "A1"


@pytest.mark.asyncio
async def test_find_with_malformed_key_skips_repository(service: ArticleService, article_repository):
    assert await service.find("not-a-number") is None
    assert article_repository.calls["get_by_id"] == 0


@pytest.mark.asyncio
async def test_search_uses_filter_criteria(service: ArticleService, article_repository):
    article_repository.add("Python tips")
    article_repository.add("Gardening")
    filter_model = Article()
    filter_model.scenario = "filter"
    filter_model.title = "python"

    results = await service.search(filter_model)

    assert [a.title for a in results] == ["Python tips"]


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService, article_repository):
    stored = article_repository.add("Delete Me")
    await service.delete(stored)
    assert await service.find(stored.id) is None


@pytest.mark.asyncio
async def test_delete_missing_article_raises(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.delete(Article(title="ghost", id=999))
