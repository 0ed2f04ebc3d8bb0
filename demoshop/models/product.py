import uuid
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from demoshop.models.base import Base, SeoMixin, TimestampMixin, UUIDMixin
from demoshop.models.category import category_product

if TYPE_CHECKING:
    from demoshop.models.brand import Brand
    from demoshop.models.category import ShopCategory


class Product(UUIDMixin, TimestampMixin, SeoMixin, Base):
    __tablename__ = "shop_products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="price_non_negative"),
        CheckConstraint("qty >= 0", name="qty_non_negative"),
    )

    shop_brand_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        ForeignKey("shop_brands.id", ondelete="CASCADE"),
        nullable=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    sku: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, unique=True)
    barcode: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    qty: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    security_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    old_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    cost: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    backorder: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    requires_shipping: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published_at: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    weight_value: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    weight_unit: Mapped[str] = mapped_column(String(10), nullable=False, default="kg")
    height_value: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    height_unit: Mapped[str] = mapped_column(String(10), nullable=False, default="cm")
    width_value: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    width_unit: Mapped[str] = mapped_column(String(10), nullable=False, default="cm")
    depth_value: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    depth_unit: Mapped[str] = mapped_column(String(10), nullable=False, default="cm")
    volume_value: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    volume_unit: Mapped[str] = mapped_column(String(10), nullable=False, default="l")

    brand: Mapped[Optional["Brand"]] = relationship(
        "Brand",
        back_populates="products",
    )
    categories: Mapped[list["ShopCategory"]] = relationship(
        "ShopCategory",
        secondary=category_product,
        back_populates="products",
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id!r} sku={self.sku!r}>"
