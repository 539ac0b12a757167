"""Shareable resource models.

Posts and trainings live in one ``resources`` table, told apart by the
``kind`` column, so grants and the access checks treat them alike.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sharehub.core.constants import (
    DEFAULT_CAN_DELETE,
    DEFAULT_CAN_EDIT,
    DEFAULT_CAN_VIEW,
    MAX_FILE_NAME_LENGTH,
    MAX_MIME_TYPE_LENGTH,
    MAX_NAME_LENGTH,
    MAX_OBJECT_KEY_LENGTH,
    MAX_URL_LENGTH,
)
from sharehub.core.database.base import Base, CreatedAtMixin, IntIDMixin, TimestampMixin


if TYPE_CHECKING:
    from sharehub.modules.accounts.models import Account
    from sharehub.modules.categories.models import Category


class Resource(Base, IntIDMixin, CreatedAtMixin):
    """Common part of a post or a training.

    Attributes:
        kind: Discriminator, ``post`` or ``training``
        owner_id: Account that uploaded the resource; never changes
        category_id: Category the resource is filed under
        is_public: Whether anyone may view it
        object_key: Key of the uploaded file in the bucket
        original_file_name: File name as uploaded
        file_type: MIME type as uploaded
    """

    __tablename__ = "resources"

    kind: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    is_public: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    object_key: Mapped[str] = mapped_column(
        String(MAX_OBJECT_KEY_LENGTH),
        nullable=False,
    )
    original_file_name: Mapped[str] = mapped_column(
        String(MAX_FILE_NAME_LENGTH),
        nullable=False,
    )
    file_type: Mapped[str] = mapped_column(
        String(MAX_MIME_TYPE_LENGTH),
        nullable=False,
    )

    owner: Mapped["Account"] = relationship("Account", lazy="selectin")
    category: Mapped["Category"] = relationship("Category", lazy="selectin")

    __mapper_args__ = {"polymorphic_on": "kind"}


class Post(Resource):
    """An uploaded image or document with an optional caption."""

    caption: Mapped[str | None] = mapped_column(Text, nullable=True)

    __mapper_args__ = {"polymorphic_identity": "post"}


class Training(Resource):
    """Training material: a file plus a title, a description and links."""

    # Nullable at the table level because posts share the table
    title: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    links: Mapped[list["TrainingLink"]] = relationship(
        "TrainingLink",
        back_populates="training",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="TrainingLink.id",
    )

    __mapper_args__ = {"polymorphic_identity": "training"}


class TrainingLink(Base, IntIDMixin):
    """An external URL attached to a training."""

    __tablename__ = "training_links"

    training_id: Mapped[int] = mapped_column(
        ForeignKey("resources.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url: Mapped[str] = mapped_column(String(MAX_URL_LENGTH), nullable=False)

    training: Mapped[Training] = relationship("Training", back_populates="links")


class Grant(Base, IntIDMixin, TimestampMixin):
    """Per-account permissions on one resource.

    At most one grant exists per (resource, grantee).
    """

    __tablename__ = "resource_grants"
    __table_args__ = (
        UniqueConstraint("resource_id", "grantee_id", name="uq_grant_resource_grantee"),
    )

    resource_id: Mapped[int] = mapped_column(
        ForeignKey("resources.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    grantee_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    can_view: Mapped[bool] = mapped_column(Boolean, default=DEFAULT_CAN_VIEW, nullable=False)
    can_edit: Mapped[bool] = mapped_column(Boolean, default=DEFAULT_CAN_EDIT, nullable=False)
    can_delete: Mapped[bool] = mapped_column(
        Boolean, default=DEFAULT_CAN_DELETE, nullable=False
    )

    grantee: Mapped["Account"] = relationship("Account", lazy="selectin")
