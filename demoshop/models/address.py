import uuid

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from demoshop.models.base import Base, TimestampMixin, UUIDMixin


class Address(UUIDMixin, TimestampMixin, Base):
    """A postal address owned by any addressable row (brand, customer).

    ``addressable_type`` holds the owner's table name and ``addressable_id``
    its primary key; there is no database-level foreign key.
    """

    __tablename__ = "addresses"
    __table_args__ = (
        Index("ix_addresses_addressable", "addressable_type", "addressable_id"),
    )

    addressable_type: Mapped[str] = mapped_column(String(50), nullable=False)
    addressable_id: Mapped[uuid.UUID] = mapped_column(nullable=False)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    zip: Mapped[str | None] = mapped_column(String(20), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Address id={self.id!r} addressable_type={self.addressable_type!r} "
            f"addressable_id={self.addressable_id!r}>"
        )
