"""Unit tests for the application factory."""

from crudkit.config import Settings
from crudkit.main import create_app


def test_crud_routes_are_named_after_the_controller():
    app = create_app(Settings(app_title="Test"))

    assert app.title == "Test"
    assert app.url_path_for("ArticleController.list") == "/articles/list"
    assert app.url_path_for("ArticleController.edit") == "/articles/edit"
    assert app.url_path_for("ArticleController.index") == "/articles"


def test_health_is_mounted_under_api_prefix():
    app = create_app(Settings())
    assert app.url_path_for("health_check") == "/api/v1/health"
