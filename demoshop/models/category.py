import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from demoshop.models.base import Base, SeoMixin, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from demoshop.models.product import Product

category_product = Table(
    "shop_category_product",
    Base.metadata,
    Column(
        "shop_category_id",
        ForeignKey("shop_categories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "shop_product_id",
        ForeignKey("shop_products.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("created_at", DateTime(timezone=True), server_default=func.now(), nullable=False),
    Column("updated_at", DateTime(timezone=True), server_default=func.now(), nullable=False),
)


class ShopCategory(UUIDMixin, TimestampMixin, SeoMixin, Base):
    __tablename__ = "shop_categories"

    parent_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("shop_categories.id", ondelete="CASCADE"),
        nullable=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    parent: Mapped["ShopCategory | None"] = relationship(
        "ShopCategory",
        back_populates="children",
        foreign_keys="[ShopCategory.parent_id]",
        remote_side="[ShopCategory.id]",
    )
    children: Mapped[list["ShopCategory"]] = relationship(
        "ShopCategory",
        back_populates="parent",
        foreign_keys="[ShopCategory.parent_id]",
    )
    products: Mapped[list["Product"]] = relationship(
        "Product",
        secondary=category_product,
        back_populates="categories",
    )

    def __repr__(self) -> str:
        return f"<ShopCategory id={self.id!r} name={self.name!r}>"
