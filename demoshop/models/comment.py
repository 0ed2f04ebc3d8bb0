import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from demoshop.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from demoshop.models.customer import Customer


class Comment(UUIDMixin, TimestampMixin, Base):
    """A customer comment attached to a product or a blog post.

    The owner is polymorphic: ``commentable_type`` is the owner's table name.
    """

    __tablename__ = "comments"
    __table_args__ = (
        Index("ix_comments_commentable", "commentable_type", "commentable_id"),
    )

    commentable_type: Mapped[str] = mapped_column(String(50), nullable=False)
    commentable_id: Mapped[uuid.UUID] = mapped_column(nullable=False)
    customer_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("shop_customers.id", ondelete="CASCADE"),
        nullable=True,
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    customer: Mapped["Customer | None"] = relationship("Customer")

    def __repr__(self) -> str:
        return (
            f"<Comment id={self.id!r} commentable_type={self.commentable_type!r} "
            f"commentable_id={self.commentable_id!r}>"
        )
