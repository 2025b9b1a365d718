"""Unit tests for the small building blocks under the CRUD controller."""

import pytest

from crudkit.domain.exceptions import UnsupportedConfigurationError
from crudkit.presentation.crud import ActionConfig, Memo, UrlBuilder, is_safe_return_url, nest_params


def test_nest_params_decodes_bracket_keys():
    params = nest_params([
        ("Article[title]", "Hello"),
        ("Article[meta][lang]", "en"),
        ("id", "3"),
        ("broken[", "x"),
    ])

    assert params == {
        "Article": {"title": "Hello", "meta": {"lang": "en"}},
        "id": "3",
        "broken[": "x",
    }


def test_nest_params_last_value_wins():
    assert nest_params([("q", "a"), ("q", "b")]) == {"q": "b"}


def test_memo_distinguishes_uncomputed_from_none():
    memo: Memo[str] = Memo()
    assert not memo.computed
    with pytest.raises(LookupError):
        memo.get()

    memo.set(None)

    assert memo.computed
    assert memo.get() is None


def test_action_config_defaults_enable_every_action():
    config = ActionConfig()
    assert config.enabled_actions == frozenset({"list", "edit", "view", "delete"})
    assert config.default_action == "list"
    assert config.return_var == "returnUrl"


def test_action_config_rejects_unknown_actions():
    with pytest.raises(UnsupportedConfigurationError):
        ActionConfig(enabled_actions={"list", "export"})


def test_url_builder_appends_query_in_order():
    urls = UrlBuilder(lambda action: f"/articles/{action}")
    assert urls.build("list") == "/articles/list"
    assert urls.build("edit", {"id": 4, "returnUrl": "/a?b=c"}) == "/articles/edit?id=4&returnUrl=%2Fa%3Fb%3Dc"


@pytest.mark.parametrize(
    ("url", "safe"),
    [
        ("/articles/list", True),
        ("/articles/list?Article[title]=x", True),
        ("//evil.example", False),
        ("https://evil.example", False),
        ("evil.example/path", False),
        ("/\\evil.example", False),
        ("/articles\n/list", False),
        ("", False),
    ],
)
def test_is_safe_return_url(url, safe):
    assert is_safe_return_url(url) is safe
