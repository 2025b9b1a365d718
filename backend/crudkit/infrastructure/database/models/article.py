"""ORM mapping for articles."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from crudkit.infrastructure.database.base import Base, TimestampMixin


class ArticleModel(TimestampMixin, Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Unique so a second article with the same title surfaces as DuplicateEntityError
    title: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    content: Mapped[str] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<ArticleModel id={self.id} title={self.title!r}>"
