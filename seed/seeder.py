"""Demo data seeder: fills every admin-panel table with randomized rows.

Each step creates its rows through the factories in :mod:`seed.factories`
and picks foreign keys at random among rows created by earlier steps.  The
whole run shares one session; the caller owns the transaction.
"""

import datetime
import logging
import random
import sys
import uuid
from decimal import Decimal
from typing import Any, TextIO, TypeVar

from pydantic import BaseModel, Field
from sqlalchemy import insert, text
from sqlalchemy.ext.asyncio import AsyncSession

from demoshop.config import Settings, settings
from demoshop.models import (
    Address,
    Author,
    BlogCategory,
    Brand,
    Customer,
    Order,
    Post,
    Product,
    ShopCategory,
    User,
    category_product,
)
from demoshop.services.auth import hash_password
from demoshop.services.notifications import new_order_notification, send_database_notification
from demoshop.services.storage import delete_directory
from seed.factories import (
    AddressFactory,
    AuthorFactory,
    BlogCategoryFactory,
    BrandFactory,
    CommentFactory,
    CustomerFactory,
    OrderFactory,
    OrderItemFactory,
    PaymentFactory,
    PostFactory,
    ProductFactory,
    ShopCategoryFactory,
    UserFactory,
    reseed,
    reset_unique,
)
from seed.progress import with_progress_bar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Inclusive (low, high) bounds drawn with random.randint.
ADDRESSES_PER_OWNER = (1, 3)
CATEGORIES_PER_PRODUCT = (3, 6)
COMMENTS_PER_PRODUCT = (10, 20)
PAYMENTS_PER_ORDER = (1, 3)
ITEMS_PER_ORDER = (2, 5)
NOTIFIED_ORDERS = (5, 8)
COMMENTS_PER_POST = (5, 10)

# Directory under the storage root holding uploaded images.
PUBLIC_DIRECTORY = "public"

GUEST_CUSTOMER_NAME = "A guest"

_TOTAL_STEPS = 8


class SeedCounts(BaseModel):
    """How many top-level rows each step creates."""

    brands: int = Field(20, ge=0)
    categories: int = Field(20, ge=0)
    children_per_category: int = Field(3, ge=0)
    customers: int = Field(1000, ge=0)
    products: int = Field(50, ge=0)
    orders: int = Field(1000, ge=0)
    blog_categories: int = Field(20, ge=0)
    authors: int = Field(20, ge=0)
    posts_per_author: int = Field(5, ge=0)


def _rand(bounds: tuple[int, int]) -> int:
    return random.randint(*bounds)


def _pick(rows: list[T]) -> T | None:
    """Return a random element of *rows*, or None when nothing was seeded."""
    return random.choice(rows) if rows else None


def _pick_many(rows: list[T], amount: int) -> list[T]:
    """Return up to *amount* distinct random elements of *rows*."""
    return random.sample(rows, k=min(amount, len(rows)))


def _id_of(row: Any) -> uuid.UUID | None:
    return row.id if row is not None else None


class DatabaseSeeder:
    def __init__(
        self,
        session: AsyncSession,
        counts: SeedCounts | None = None,
        *,
        config: Settings | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.session = session
        self.counts = counts or SeedCounts()
        self.config = config or settings
        self.out = out or sys.stdout

        self.admin: User | None = None
        self.brands: list[Brand] = []
        self.categories: list[ShopCategory] = []
        self.customers: list[Customer] = []
        self.products: list[Product] = []
        self.orders: list[Order] = []
        self.blog_categories: list[BlogCategory] = []
        self.authors: list[Author] = []

        # order id -> (customer name, item count), for notification bodies
        self._order_summaries: dict[uuid.UUID, tuple[str, int]] = {}
        self._step_number = 0

    # ------------------------------------------------------------------
    # Console output
    # ------------------------------------------------------------------

    def _step(self, message: str) -> None:
        self._step_number += 1
        print(f"\n[{self._step_number}/{_TOTAL_STEPS}] {message}", file=self.out)

    def _done(self, message: str) -> None:
        print(f"  ✓ {message}", file=self.out)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    async def run(self) -> dict[str, int]:
        """Run every seeding step in order and return created row counts."""
        await self._use_utc()

        reset_unique()
        if self.config.seed_random_seed is not None:
            reseed(self.config.seed_random_seed)
            logger.info("Seeding with random seed %d", self.config.seed_random_seed)

        # Clear images
        delete_directory(self.config.storage_path, PUBLIC_DIRECTORY)

        self._step("Creating admin user...")
        self.admin = await self.seed_admin_user()
        self._done("Admin user created.")

        self._step("Creating shop brands...")
        self.brands = await self.seed_brands()
        self._done("Shop brands created.")

        self._step("Creating shop categories...")
        self.categories = await self.seed_shop_categories()
        self._done("Shop categories created.")

        self._step("Creating shop customers...")
        self.customers = await self.seed_customers()
        self._done("Shop customers created.")

        self._step("Creating shop products...")
        self.products = await self.seed_products()
        self._done("Shop products created.")

        self._step("Creating orders...")
        self.orders = await self.seed_orders()
        await self.notify_random_orders()
        self._done("Shop orders created.")

        self._step("Creating blog categories...")
        self.blog_categories = await self.seed_blog_categories()
        self._done("Blog categories created.")

        self._step("Creating blog authors and posts...")
        self.authors = await self.seed_authors_and_posts()
        self._done("Blog authors and posts created.")

        created = {
            "brands": len(self.brands),
            "shop_categories": len(self.categories),
            "customers": len(self.customers),
            "products": len(self.products),
            "orders": len(self.orders),
            "blog_categories": len(self.blog_categories),
            "authors": len(self.authors),
        }
        logger.info("Seeding finished: %s", created)
        return created

    async def _use_utc(self) -> None:
        """Pin the session time zone so timestamps are stored in UTC."""
        if self.session.get_bind().dialect.name == "postgresql":
            await self.session.execute(text("SET TIME ZONE 'UTC'"))

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def seed_admin_user(self) -> User:
        user = UserFactory.build(
            name=self.config.seed_admin_name,
            email=self.config.seed_admin_email,
            password_hash=hash_password(self.config.seed_admin_password),
        )
        self.session.add(user)
        await self.session.flush()
        logger.info("Created admin user %s", user.email)
        return user

    async def seed_brands(self) -> list[Brand]:
        """Create brands with addresses, then number them in creation order."""
        brands = await with_progress_bar(self.counts.brands, self._create_brand, file=self.out)

        for position, brand in enumerate(brands, start=1):
            brand.sort = position
        await self.session.flush()
        return brands

    async def seed_shop_categories(self) -> list[ShopCategory]:
        """Create top-level categories with children; returns the top level only."""
        return await with_progress_bar(
            self.counts.categories, self._create_shop_category, file=self.out
        )

    async def seed_customers(self) -> list[Customer]:
        return await with_progress_bar(self.counts.customers, self._create_customer, file=self.out)

    async def seed_products(self) -> list[Product]:
        return await with_progress_bar(self.counts.products, self._create_product, file=self.out)

    async def seed_orders(self) -> list[Order]:
        return await with_progress_bar(self.counts.orders, self._create_order, file=self.out)

    async def notify_random_orders(self) -> int:
        """Send a "New order" notification to the admin for a few random orders."""
        if self.admin is None:
            raise RuntimeError("The admin user must be seeded before order notifications")

        notified = _pick_many(self.orders, _rand(NOTIFIED_ORDERS))
        for order in notified:
            customer_name, item_count = self._order_summaries[order.id]
            await send_database_notification(
                self.session,
                notifiable=self.admin,
                data=new_order_notification(
                    order,
                    customer_name,
                    item_count,
                    admin_url=self.config.admin_url,
                ),
            )

        logger.info("Notified %s about %d orders", self.admin.email, len(notified))
        return len(notified)

    async def seed_blog_categories(self) -> list[BlogCategory]:
        return await with_progress_bar(
            self.counts.blog_categories, self._create_blog_category, file=self.out
        )

    async def seed_authors_and_posts(self) -> list[Author]:
        return await with_progress_bar(self.counts.authors, self._create_author, file=self.out)

    # ------------------------------------------------------------------
    # Per-row factories
    # ------------------------------------------------------------------

    def _addresses_for(self, owner_type: str, owner_id: uuid.UUID) -> list[Address]:
        return AddressFactory.build_batch(
            _rand(ADDRESSES_PER_OWNER),
            addressable_type=owner_type,
            addressable_id=owner_id,
        )

    async def _create_brand(self) -> Brand:
        brand = BrandFactory.build()
        self.session.add(brand)
        self.session.add_all(self._addresses_for(Brand.__tablename__, brand.id))
        await self.session.flush()
        return brand

    async def _create_shop_category(self) -> ShopCategory:
        parent = ShopCategoryFactory.build()
        self.session.add(parent)
        # Children reference the parent row, so it must be inserted first.
        await self.session.flush()

        children = ShopCategoryFactory.build_batch(
            self.counts.children_per_category,
            parent_id=parent.id,
        )
        self.session.add_all(children)
        await self.session.flush()
        return parent

    async def _create_customer(self) -> Customer:
        customer = CustomerFactory.build()
        self.session.add(customer)
        self.session.add_all(self._addresses_for(Customer.__tablename__, customer.id))
        await self.session.flush()
        return customer

    async def _create_product(self) -> Product:
        product = ProductFactory.build(shop_brand_id=_id_of(_pick(self.brands)))
        self.session.add(product)

        comments = [
            CommentFactory.build(
                commentable_type=Product.__tablename__,
                commentable_id=product.id,
                customer_id=_id_of(_pick(self.customers)),
            )
            for _ in range(_rand(COMMENTS_PER_PRODUCT))
        ]
        self.session.add_all(comments)
        await self.session.flush()

        categories = _pick_many(self.categories, _rand(CATEGORIES_PER_PRODUCT))
        if categories:
            now = datetime.datetime.now(datetime.UTC)
            await self.session.execute(
                insert(category_product),
                [
                    {
                        "shop_category_id": category.id,
                        "shop_product_id": product.id,
                        "created_at": now,
                        "updated_at": now,
                    }
                    for category in categories
                ],
            )
        return product

    async def _create_order(self) -> Order:
        customer = _pick(self.customers)
        order = OrderFactory.build(shop_customer_id=_id_of(customer))

        payments = PaymentFactory.build_batch(
            _rand(PAYMENTS_PER_ORDER),
            shop_order_id=order.id,
            currency=order.currency,
        )
        items = [
            OrderItemFactory.build(
                shop_order_id=order.id,
                shop_product_id=_id_of(_pick(self.products)),
                sort=position,
            )
            for position in range(_rand(ITEMS_PER_ORDER))
        ]
        order.total_price = sum((item.qty * item.unit_price for item in items), Decimal("0"))

        self.session.add(order)
        self.session.add_all(payments)
        self.session.add_all(items)
        await self.session.flush()

        customer_name = customer.name if customer is not None else GUEST_CUSTOMER_NAME
        self._order_summaries[order.id] = (customer_name, len(items))
        return order

    async def _create_blog_category(self) -> BlogCategory:
        category = BlogCategoryFactory.build()
        self.session.add(category)
        await self.session.flush()
        return category

    async def _create_author(self) -> Author:
        author = AuthorFactory.build()
        self.session.add(author)

        # One comment count per author, shared by all of their posts.
        comments_per_post = _rand(COMMENTS_PER_POST)
        for _ in range(self.counts.posts_per_author):
            post = PostFactory.build(
                blog_author_id=author.id,
                blog_category_id=_id_of(_pick(self.blog_categories)),
            )
            self.session.add(post)
            self.session.add_all(
                CommentFactory.build(
                    commentable_type=Post.__tablename__,
                    commentable_id=post.id,
                    customer_id=_id_of(_pick(self.customers)),
                )
                for _ in range(comments_per_post)
            )

        await self.session.flush()
        return author
