from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from demoshop.models.base import Base, SeoMixin, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from demoshop.models.product import Product


class Brand(UUIDMixin, TimestampMixin, SeoMixin, Base):
    __tablename__ = "shop_brands"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    sort: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="brand",
    )

    def __repr__(self) -> str:
        return f"<Brand id={self.id!r} slug={self.slug!r}>"
