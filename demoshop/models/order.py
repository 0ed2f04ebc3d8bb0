import uuid
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from demoshop.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from demoshop.models.customer import Customer
    from demoshop.models.product import Product


class Order(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "shop_orders"

    shop_customer_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("shop_customers.id", ondelete="SET NULL"),
        nullable=True,
    )
    number: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    total_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="new")
    currency: Mapped[str | None] = mapped_column(String(3), nullable=True)
    shipping_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    shipping_method: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    customer: Mapped["Customer | None"] = relationship("Customer")
    items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        order_by="OrderItem.sort",
    )
    payments: Mapped[list["Payment"]] = relationship(
        "Payment",
        back_populates="order",
    )

    def __repr__(self) -> str:
        return f"<Order id={self.id!r} number={self.number!r} status={self.status!r}>"


class OrderItem(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "shop_order_items"
    __table_args__ = (
        CheckConstraint("qty > 0", name="qty_positive"),
    )

    sort: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    shop_order_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("shop_orders.id", ondelete="CASCADE"),
        nullable=False,
    )
    shop_product_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("shop_products.id", ondelete="CASCADE"),
        nullable=True,
    )
    qty: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    order: Mapped["Order"] = relationship("Order", back_populates="items")
    product: Mapped["Product | None"] = relationship("Product")

    def __repr__(self) -> str:
        return (
            f"<OrderItem id={self.id!r} shop_order_id={self.shop_order_id!r} "
            f"qty={self.qty!r}>"
        )


class Payment(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "shop_payments"

    shop_order_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("shop_orders.id", ondelete="CASCADE"),
        nullable=False,
    )
    reference: Mapped[str] = mapped_column(String(255), nullable=False)
    provider: Mapped[str] = mapped_column(String(20), nullable=False)
    method: Mapped[str] = mapped_column(String(20), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)

    order: Mapped["Order"] = relationship("Order", back_populates="payments")

    def __repr__(self) -> str:
        return f"<Payment id={self.id!r} provider={self.provider!r} amount={self.amount!r}>"
