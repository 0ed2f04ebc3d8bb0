import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from demoshop.models.base import Base, TimestampMixin, UUIDMixin


class Notification(UUIDMixin, TimestampMixin, Base):
    """An in-app notification shown in the admin panel's notification tray."""

    __tablename__ = "notifications"
    __table_args__ = (
        Index("ix_notifications_notifiable", "notifiable_type", "notifiable_id"),
    )

    type: Mapped[str] = mapped_column(String(100), nullable=False)
    notifiable_type: Mapped[str] = mapped_column(String(50), nullable=False)
    notifiable_id: Mapped[uuid.UUID] = mapped_column(nullable=False)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    read_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Notification id={self.id!r} type={self.type!r} "
            f"notifiable_id={self.notifiable_id!r}>"
        )
