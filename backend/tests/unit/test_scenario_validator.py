"""Unit tests for scenario-based attribute binding and validation."""

import pytest

from crudkit.application.services.article_service import ARTICLE_SCENARIOS
from crudkit.application.services import ScenarioValidator
from crudkit.domain.entities import Article
from crudkit.domain.exceptions import UnsupportedConfigurationError


@pytest.fixture
def validator() -> ScenarioValidator:
    return ScenarioValidator("Article", ARTICLE_SCENARIOS)


def _article(scenario: str, **values) -> Article:
    article = Article(**values)
    article.scenario = scenario
    return article


def test_assign_ignores_attributes_outside_the_scenario(validator: ScenarioValidator):
    article = _article("create")
    validator.assign(article, {"title": "T", "content": "C", "id": "42", "is_admin": "1"})

    assert article.title == "T"
    assert article.content == "C"
    assert article.id is None
    assert not hasattr(article, "is_admin")


def test_validate_reports_errors_per_field(validator: ScenarioValidator):
    article = _article("create", title="", content="")
    errors = validator.validate(article)

    assert set(errors) == {"title", "content"}
    assert all(messages for messages in errors.values())


def test_validate_writes_back_coerced_values(validator: ScenarioValidator):
    article = _article("update", title="  Spaced  ", content="Body", id=1)
    assert validator.validate(article) == {}
    assert article.title == "Spaced"


def test_assign_coerced_skips_blank_and_invalid_values(validator: ScenarioValidator):
    article = _article("filter")
    validator.assign_coerced(article, {"id": "abc", "title": "  ", "content": "needle", "bogus": "x"})

    assert article.id is None
    assert article.title == ""
    assert article.content == "needle"
    assert not hasattr(article, "bogus")


def test_assign_coerced_converts_types(validator: ScenarioValidator):
    article = _article("filter")
    validator.assign_coerced(article, {"id": "7"})
    assert article.id == 7


def test_criteria_only_contains_non_blank_values(validator: ScenarioValidator):
    article = _article("filter", title="py")
    assert validator.criteria(article) == {"title": "py"}


def test_unknown_scenario_is_a_configuration_error(validator: ScenarioValidator):
    with pytest.raises(UnsupportedConfigurationError):
        validator.safe_attributes("import")
