"""Fake-data factories for every seeded model.

Each factory builds an *unsaved* ORM instance with a fresh UUID; the seeder
adds it to the session.  Columns with unique constraints draw from the shared
``fake.unique`` proxy, so call :func:`reset_unique` before a new run.
"""

import datetime
import random
import uuid
from decimal import Decimal

import factory
import factory.random
from faker import Faker
from faker.utils.text import slugify

from demoshop.models import (
    Address,
    Author,
    BlogCategory,
    Brand,
    Comment,
    Customer,
    Order,
    OrderItem,
    Payment,
    Post,
    Product,
    ShopCategory,
    User,
)
from demoshop.services.auth import hash_password

fake = Faker()

ORDER_STATUSES = ("new", "processing", "shipped", "delivered", "cancelled")
PAYMENT_PROVIDERS = ("stripe", "paypal")
PAYMENT_METHODS = ("credit_card", "bank_transfer", "paypal")
PRODUCT_TYPES = ("deliverable", "downloadable")
SHIPPING_METHODS = ("free", "flat", "express")
GENDERS = ("male", "female")

DEFAULT_USER_PASSWORD = "password"


def reset_unique() -> None:
    """Forget every value handed out by ``fake.unique``."""
    fake.unique.clear()


def reseed(seed: int) -> None:
    """Make the next run reproducible: Faker, factory_boy and ``random``."""
    fake.seed_instance(seed)
    factory.random.reseed_random(seed)
    random.seed(seed)


def money(low: int, high: int) -> Decimal:
    """Return a random amount between *low* and *high* with two decimals."""
    return Decimal(fake.random_int(low * 100, high * 100)) / 100


def _seo_title(obj) -> str:
    return obj.name[:60]


class UserFactory(factory.Factory):
    class Meta:
        model = User

    id = factory.LazyFunction(uuid.uuid4)
    name = factory.Faker("name")
    email = factory.LazyFunction(lambda: fake.unique.safe_email())
    email_verified_at = factory.LazyFunction(lambda: datetime.datetime.now(datetime.UTC))
    password_hash = factory.LazyFunction(lambda: hash_password(DEFAULT_USER_PASSWORD))


class BrandFactory(factory.Factory):
    class Meta:
        model = Brand

    id = factory.LazyFunction(uuid.uuid4)
    name = factory.LazyFunction(lambda: fake.unique.company())
    slug = factory.LazyAttribute(lambda o: slugify(o.name))
    website = factory.LazyFunction(lambda: f"https://www.{fake.domain_name()}")
    description = factory.Faker("paragraph", nb_sentences=4)
    is_visible = factory.Faker("boolean")
    seo_title = factory.LazyAttribute(_seo_title)
    seo_description = factory.Faker("text", max_nb_chars=160)


class AddressFactory(factory.Factory):
    """Build an address; pass ``addressable_type`` and ``addressable_id``."""

    class Meta:
        model = Address

    id = factory.LazyFunction(uuid.uuid4)
    country = factory.Faker("country")
    street = factory.Faker("street_address")
    city = factory.Faker("city")
    state = factory.Faker("state")
    zip = factory.Faker("postcode")


class ShopCategoryFactory(factory.Factory):
    class Meta:
        model = ShopCategory

    id = factory.LazyFunction(uuid.uuid4)
    parent_id = None
    name = factory.LazyFunction(lambda: fake.unique.word().title())
    slug = factory.LazyAttribute(lambda o: slugify(o.name))
    description = factory.Faker("paragraph")
    position = factory.Faker("random_int", min=0, max=100)
    is_visible = factory.Faker("boolean", chance_of_getting_true=80)
    seo_title = factory.LazyAttribute(_seo_title)
    seo_description = factory.Faker("text", max_nb_chars=160)


class CustomerFactory(factory.Factory):
    class Meta:
        model = Customer

    id = factory.LazyFunction(uuid.uuid4)
    name = factory.Faker("name")
    email = factory.LazyFunction(lambda: fake.unique.safe_email())
    photo = factory.Faker("image_url", width=200, height=200)
    gender = factory.Faker("random_element", elements=GENDERS)
    phone = factory.Faker("phone_number")
    birthday = factory.Faker("date_of_birth", minimum_age=18, maximum_age=70)


class ProductFactory(factory.Factory):
    """Build a product; pass ``shop_brand_id`` to tie it to a brand."""

    class Meta:
        model = Product

    id = factory.LazyFunction(uuid.uuid4)
    shop_brand_id = None
    name = factory.LazyFunction(lambda: fake.unique.catch_phrase())
    slug = factory.LazyAttribute(lambda o: slugify(o.name))
    sku = factory.LazyFunction(lambda: fake.unique.ean(length=8))
    barcode = factory.LazyFunction(lambda: fake.unique.ean13())
    description = factory.Faker("paragraph", nb_sentences=5)
    qty = factory.Faker("random_int", min=1, max=100)
    security_stock = factory.Faker("random_int", min=1, max=10)
    featured = factory.Faker("boolean")
    is_visible = factory.Faker("boolean", chance_of_getting_true=80)
    old_price = factory.LazyFunction(lambda: money(100, 500))
    price = factory.LazyFunction(lambda: money(80, 400))
    cost = factory.LazyFunction(lambda: money(50, 200))
    type = factory.Faker("random_element", elements=PRODUCT_TYPES)
    backorder = factory.Faker("boolean")
    requires_shipping = factory.Faker("boolean")
    published_at = factory.Faker("date_between", start_date="-1y", end_date="+1y")
    weight_value = factory.LazyFunction(lambda: money(0, 100))
    weight_unit = "kg"
    height_value = factory.LazyFunction(lambda: money(0, 100))
    height_unit = "cm"
    width_value = factory.LazyFunction(lambda: money(0, 100))
    width_unit = "cm"
    depth_value = factory.LazyFunction(lambda: money(0, 100))
    depth_unit = "cm"
    volume_value = factory.LazyFunction(lambda: money(0, 100))
    volume_unit = "l"
    seo_title = factory.LazyAttribute(_seo_title)
    seo_description = factory.Faker("text", max_nb_chars=160)


class OrderFactory(factory.Factory):
    """Build an order; pass ``shop_customer_id`` to tie it to a customer."""

    class Meta:
        model = Order

    id = factory.LazyFunction(uuid.uuid4)
    shop_customer_id = None
    number = factory.LazyFunction(
        lambda: f"OR-{fake.unique.random_number(digits=6, fix_len=True)}"
    )
    total_price = factory.LazyFunction(lambda: money(100, 2000))
    status = factory.Faker("random_element", elements=ORDER_STATUSES)
    currency = factory.LazyFunction(lambda: fake.currency_code().lower())
    shipping_price = factory.LazyFunction(lambda: money(100, 500))
    shipping_method = factory.Faker("random_element", elements=SHIPPING_METHODS)
    notes = factory.Faker("text", max_nb_chars=200)
    created_at = factory.Faker(
        "date_time_between",
        start_date="-1y",
        end_date="now",
        tzinfo=datetime.UTC,
    )
    updated_at = factory.LazyAttribute(lambda o: o.created_at)


class OrderItemFactory(factory.Factory):
    """Build an order line; pass ``shop_order_id`` and ``shop_product_id``."""

    class Meta:
        model = OrderItem

    id = factory.LazyFunction(uuid.uuid4)
    sort = factory.Sequence(lambda n: n)
    qty = factory.Faker("random_int", min=1, max=10)
    unit_price = factory.LazyFunction(lambda: money(100, 500))


class PaymentFactory(factory.Factory):
    """Build a payment; pass ``shop_order_id`` and the order's ``currency``."""

    class Meta:
        model = Payment

    id = factory.LazyFunction(uuid.uuid4)
    reference = factory.Faker("pystr", min_chars=10, max_chars=10)
    provider = factory.Faker("random_element", elements=PAYMENT_PROVIDERS)
    method = factory.Faker("random_element", elements=PAYMENT_METHODS)
    amount = factory.LazyFunction(lambda: money(100, 2000))
    currency = factory.LazyFunction(lambda: fake.currency_code().lower())


class CommentFactory(factory.Factory):
    """Build a comment; pass ``commentable_type``, ``commentable_id`` and ``customer_id``."""

    class Meta:
        model = Comment

    id = factory.LazyFunction(uuid.uuid4)
    title = factory.Faker("sentence")
    content = factory.Faker("paragraph")
    is_visible = factory.Faker("boolean")
    created_at = factory.Faker(
        "date_time_between",
        start_date="-1y",
        end_date="now",
        tzinfo=datetime.UTC,
    )
    updated_at = factory.LazyAttribute(lambda o: o.created_at)


class BlogCategoryFactory(factory.Factory):
    class Meta:
        model = BlogCategory

    id = factory.LazyFunction(uuid.uuid4)
    name = factory.LazyFunction(lambda: fake.unique.word().title())
    slug = factory.LazyAttribute(lambda o: slugify(o.name))
    description = factory.Faker("paragraph")
    is_visible = factory.Faker("boolean", chance_of_getting_true=80)
    seo_title = factory.LazyAttribute(_seo_title)
    seo_description = factory.Faker("text", max_nb_chars=160)


class AuthorFactory(factory.Factory):
    class Meta:
        model = Author

    id = factory.LazyFunction(uuid.uuid4)
    name = factory.Faker("name")
    email = factory.LazyFunction(lambda: fake.unique.safe_email())
    photo = factory.Faker("image_url", width=200, height=200)
    bio = factory.Faker("paragraph")
    github_handle = factory.Faker("user_name")
    twitter_handle = factory.Faker("user_name")


class PostFactory(factory.Factory):
    """Build a post; pass ``blog_author_id`` and ``blog_category_id``."""

    class Meta:
        model = Post

    id = factory.LazyFunction(uuid.uuid4)
    title = factory.LazyFunction(lambda: fake.unique.sentence(nb_words=4).rstrip("."))
    slug = factory.LazyAttribute(lambda o: slugify(o.title))
    content = factory.LazyFunction(lambda: "\n\n".join(fake.paragraphs(nb=5)))
    published_at = factory.Faker("date_between", start_date="-6M", end_date="+1M")
    image = factory.Faker("image_url")
    seo_title = factory.LazyAttribute(lambda o: o.title[:60])
    seo_description = factory.Faker("text", max_nb_chars=160)
