"""Tests for the fake-data factories in ``seed.factories``."""

import re
import uuid
from decimal import Decimal

import pytest
from faker.utils.text import slugify

from demoshop.models import Address, Brand, Order, Product
from seed import factories
from seed.factories import (
    AddressFactory,
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
    money,
    reseed,
    reset_unique,
)


@pytest.fixture(autouse=True)
def _fresh_unique_values() -> None:
    reset_unique()


def test_brand_factory_builds_unsaved_brand() -> None:
    brand = BrandFactory.build()
    assert isinstance(brand, Brand)
    assert isinstance(brand.id, uuid.UUID)
    assert brand.slug == slugify(brand.name)
    assert brand.website.startswith("https://www.")
    assert len(brand.seo_title) <= 60
    assert brand.sort is None


def test_factories_hand_out_distinct_ids() -> None:
    ids = {brand.id for brand in BrandFactory.build_batch(10)}
    assert len(ids) == 10


def test_unique_columns_do_not_repeat() -> None:
    emails = [customer.email for customer in CustomerFactory.build_batch(50)]
    assert len(set(emails)) == 50


def test_address_factory_accepts_polymorphic_owner() -> None:
    owner_id = uuid.uuid4()
    address = AddressFactory.build(addressable_type="shop_brands", addressable_id=owner_id)
    assert isinstance(address, Address)
    assert address.addressable_type == "shop_brands"
    assert address.addressable_id == owner_id
    assert address.city


def test_shop_category_factory_defaults_to_top_level() -> None:
    category = ShopCategoryFactory.build()
    assert category.parent_id is None
    child = ShopCategoryFactory.build(parent_id=category.id)
    assert child.parent_id == category.id


def test_customer_factory_gender_and_birthday() -> None:
    customer = CustomerFactory.build()
    assert customer.gender in factories.GENDERS
    assert customer.birthday is not None


def test_product_factory_fields() -> None:
    product = ProductFactory.build()
    assert isinstance(product, Product)
    assert product.shop_brand_id is None
    assert product.type in factories.PRODUCT_TYPES
    assert Decimal("80") <= product.price <= Decimal("400")
    assert product.weight_unit == "kg"
    assert product.volume_unit == "l"
    assert product.slug == slugify(product.name)


def test_order_factory_number_and_status() -> None:
    order = OrderFactory.build()
    assert isinstance(order, Order)
    assert re.fullmatch(r"OR-\d{6}", order.number)
    assert order.status in factories.ORDER_STATUSES
    assert order.currency == order.currency.lower()
    assert len(order.currency) == 3
    assert order.created_at.tzinfo is not None
    assert order.updated_at == order.created_at


def test_order_item_factory_ties_to_order_and_product() -> None:
    order_id, product_id = uuid.uuid4(), uuid.uuid4()
    item = OrderItemFactory.build(shop_order_id=order_id, shop_product_id=product_id, sort=2)
    assert item.shop_order_id == order_id
    assert item.shop_product_id == product_id
    assert item.sort == 2
    assert 1 <= item.qty <= 10


def test_payment_factory_values() -> None:
    payment = PaymentFactory.build(shop_order_id=uuid.uuid4(), currency="eur")
    assert payment.provider in factories.PAYMENT_PROVIDERS
    assert payment.method in factories.PAYMENT_METHODS
    assert payment.currency == "eur"
    assert len(payment.reference) == 10


def test_comment_factory_takes_owner_and_customer() -> None:
    post_id, customer_id = uuid.uuid4(), uuid.uuid4()
    comment = CommentFactory.build(
        commentable_type="blog_posts",
        commentable_id=post_id,
        customer_id=customer_id,
    )
    assert comment.commentable_type == "blog_posts"
    assert comment.commentable_id == post_id
    assert comment.customer_id == customer_id


def test_post_factory_slug_follows_title() -> None:
    post = PostFactory.build()
    assert not post.title.endswith(".")
    assert post.slug == slugify(post.title)
    assert post.content.count("\n\n") == 4


def test_user_factory_password_override_skips_hashing() -> None:
    user = UserFactory.build(password_hash="not-a-real-hash")
    assert user.password_hash == "not-a-real-hash"
    assert user.email_verified_at is not None


def test_money_has_two_decimals_and_stays_in_range() -> None:
    for _ in range(100):
        amount = money(100, 500)
        assert Decimal("100") <= amount <= Decimal("500")
        assert amount == amount.quantize(Decimal("0.01"))


def test_reseed_makes_values_reproducible() -> None:
    reseed(1234)
    first = [CustomerFactory.build().name for _ in range(3)]
    reseed(1234)
    second = [CustomerFactory.build().name for _ in range(3)]
    assert first == second
