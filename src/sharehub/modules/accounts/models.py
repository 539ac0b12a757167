"""Account database model."""

from sqlalchemy import Enum as SAEnum
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sharehub.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH
from sharehub.core.database.base import Base, IntIDMixin, TimestampMixin
from sharehub.core.permissions.types import Role


class Account(Base, IntIDMixin, TimestampMixin):
    """A person who can log in, own resources and receive grants.

    Attributes:
        email: Unique email address
        name: Display name
        password_hash: Bcrypt-hashed password
        role: USER or ADMIN; changed only through promote/demote
    """

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    role: Mapped[Role] = mapped_column(
        SAEnum(Role, name="account_role"),
        default=Role.USER,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Account {self.email}>"
