"""Article list/edit/view/delete pages."""

from crudkit.domain.entities import Article
from crudkit.infrastructure.dependencies import get_article_service
from crudkit.presentation.crud import ActionConfig, CrudActionController, build_crud_router


class ArticleController(CrudActionController[Article]):
    entity_type = Article
    view_dir = "articles"
    config = ActionConfig()


router = build_crud_router(
    ArticleController,
    prefix="/articles",
    service_dependency=get_article_service,
    tags=["Articles"],
)
