"""Category database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from sharehub.core.constants import MAX_CATEGORY_NAME_LENGTH
from sharehub.core.database.base import Base, CreatedAtMixin, IntIDMixin


class Category(Base, IntIDMixin, CreatedAtMixin):
    """Shared taxonomy entry that posts and trainings are filed under.

    Names are unique ignoring case; the service enforces it.
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(MAX_CATEGORY_NAME_LENGTH),
        unique=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Category {self.name}>"
