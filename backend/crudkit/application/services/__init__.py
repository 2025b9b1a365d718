from .scenario_validator import ScenarioValidator
from .crud_service import CrudService
from .article_service import ArticleService

__all__ = [
    "ScenarioValidator",
    "CrudService",
    "ArticleService",
]
