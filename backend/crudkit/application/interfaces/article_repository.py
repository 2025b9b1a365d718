"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from crudkit.domain.entities import Article

from .crud_repository import CrudRepository


class ArticleRepository(CrudRepository[Article]):
    """Port for article persistence — implemented in the infrastructure layer."""
