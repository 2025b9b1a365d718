"""Application service (use case) for Article operations."""

from crudkit.application.interfaces import ArticleRepository
from crudkit.application.schemas import ArticleCreate, ArticleFilter, ArticleUpdate
from crudkit.application.services.crud_service import CrudService
from crudkit.application.services.scenario_validator import ScenarioValidator
from crudkit.domain.entities import Article

ARTICLE_SCENARIOS = {
    "create": ArticleCreate,
    "update": ArticleUpdate,
    "filter": ArticleFilter,
}


class ArticleService(CrudService[Article]):
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        super().__init__(
            Article,
            repository,
            ScenarioValidator("Article", ARTICLE_SCENARIOS),
        )
