"""initial schema

Revision ID: 5c1e9d7a2b30
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '5c1e9d7a2b30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def _seo() -> list[sa.Column]:
    return [
        sa.Column('seo_title', sa.String(60), nullable=True),
        sa.Column('seo_description', sa.String(160), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('email_verified_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )

    op.create_table(
        'addresses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('addressable_type', sa.String(50), nullable=False),
        sa.Column('addressable_id', sa.Uuid(), nullable=False),
        sa.Column('country', sa.String(100), nullable=True),
        sa.Column('street', sa.String(255), nullable=True),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('state', sa.String(100), nullable=True),
        sa.Column('zip', sa.String(20), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_addresses'),
    )
    op.create_index('ix_addresses_addressable', 'addresses', ['addressable_type', 'addressable_id'])

    op.create_table(
        'shop_brands',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('website', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('sort', sa.Integer(), nullable=True),
        sa.Column('is_visible', sa.Boolean(), nullable=False),
        *_seo(),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_shop_brands'),
        sa.UniqueConstraint('slug', name='uq_shop_brands_slug'),
    )

    op.create_table(
        'shop_categories',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('parent_id', sa.Uuid(), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('is_visible', sa.Boolean(), nullable=False),
        *_seo(),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['parent_id'], ['shop_categories.id'],
            name='fk_shop_categories_parent_id_shop_categories',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_shop_categories'),
        sa.UniqueConstraint('slug', name='uq_shop_categories_slug'),
    )

    op.create_table(
        'shop_customers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('photo', sa.String(255), nullable=True),
        sa.Column('gender', sa.String(10), nullable=False),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('birthday', sa.Date(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_shop_customers'),
        sa.UniqueConstraint('email', name='uq_shop_customers_email'),
    )

    op.create_table(
        'shop_products',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('shop_brand_id', sa.Uuid(), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('sku', sa.String(50), nullable=True),
        sa.Column('barcode', sa.String(50), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('qty', sa.Integer(), nullable=False),
        sa.Column('security_stock', sa.Integer(), nullable=False),
        sa.Column('featured', sa.Boolean(), nullable=False),
        sa.Column('is_visible', sa.Boolean(), nullable=False),
        sa.Column('old_price', sa.Numeric(10, 2), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
        sa.Column('cost', sa.Numeric(10, 2), nullable=True),
        sa.Column('type', sa.String(20), nullable=True),
        sa.Column('backorder', sa.Boolean(), nullable=False),
        sa.Column('requires_shipping', sa.Boolean(), nullable=False),
        sa.Column('published_at', sa.Date(), nullable=True),
        sa.Column('weight_value', sa.Numeric(10, 2), nullable=True),
        sa.Column('weight_unit', sa.String(10), nullable=False),
        sa.Column('height_value', sa.Numeric(10, 2), nullable=True),
        sa.Column('height_unit', sa.String(10), nullable=False),
        sa.Column('width_value', sa.Numeric(10, 2), nullable=True),
        sa.Column('width_unit', sa.String(10), nullable=False),
        sa.Column('depth_value', sa.Numeric(10, 2), nullable=True),
        sa.Column('depth_unit', sa.String(10), nullable=False),
        sa.Column('volume_value', sa.Numeric(10, 2), nullable=True),
        sa.Column('volume_unit', sa.String(10), nullable=False),
        *_seo(),
        *_timestamps(),
        sa.CheckConstraint('price >= 0', name='ck_shop_products_price_non_negative'),
        sa.CheckConstraint('qty >= 0', name='ck_shop_products_qty_non_negative'),
        sa.ForeignKeyConstraint(
            ['shop_brand_id'], ['shop_brands.id'],
            name='fk_shop_products_shop_brand_id_shop_brands',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_shop_products'),
        sa.UniqueConstraint('slug', name='uq_shop_products_slug'),
        sa.UniqueConstraint('sku', name='uq_shop_products_sku'),
        sa.UniqueConstraint('barcode', name='uq_shop_products_barcode'),
    )

    op.create_table(
        'shop_category_product',
        sa.Column('shop_category_id', sa.Uuid(), nullable=False),
        sa.Column('shop_product_id', sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['shop_category_id'], ['shop_categories.id'],
            name='fk_shop_category_product_shop_category_id_shop_categories',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['shop_product_id'], ['shop_products.id'],
            name='fk_shop_category_product_shop_product_id_shop_products',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('shop_category_id', 'shop_product_id', name='pk_shop_category_product'),
    )

    op.create_table(
        'shop_orders',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('shop_customer_id', sa.Uuid(), nullable=True),
        sa.Column('number', sa.String(32), nullable=False),
        sa.Column('total_price', sa.Numeric(12, 2), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('currency', sa.String(3), nullable=True),
        sa.Column('shipping_price', sa.Numeric(10, 2), nullable=True),
        sa.Column('shipping_method', sa.String(255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['shop_customer_id'], ['shop_customers.id'],
            name='fk_shop_orders_shop_customer_id_shop_customers',
            ondelete='SET NULL',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_shop_orders'),
        sa.UniqueConstraint('number', name='uq_shop_orders_number'),
    )

    op.create_table(
        'shop_order_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('sort', sa.Integer(), nullable=False),
        sa.Column('shop_order_id', sa.Uuid(), nullable=False),
        sa.Column('shop_product_id', sa.Uuid(), nullable=True),
        sa.Column('qty', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.Numeric(10, 2), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('qty > 0', name='ck_shop_order_items_qty_positive'),
        sa.ForeignKeyConstraint(
            ['shop_order_id'], ['shop_orders.id'],
            name='fk_shop_order_items_shop_order_id_shop_orders',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['shop_product_id'], ['shop_products.id'],
            name='fk_shop_order_items_shop_product_id_shop_products',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_shop_order_items'),
    )

    op.create_table(
        'shop_payments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('shop_order_id', sa.Uuid(), nullable=False),
        sa.Column('reference', sa.String(255), nullable=False),
        sa.Column('provider', sa.String(20), nullable=False),
        sa.Column('method', sa.String(20), nullable=False),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('currency', sa.String(3), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['shop_order_id'], ['shop_orders.id'],
            name='fk_shop_payments_shop_order_id_shop_orders',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_shop_payments'),
    )

    op.create_table(
        'comments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('commentable_type', sa.String(50), nullable=False),
        sa.Column('commentable_id', sa.Uuid(), nullable=False),
        sa.Column('customer_id', sa.Uuid(), nullable=True),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('is_visible', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['customer_id'], ['shop_customers.id'],
            name='fk_comments_customer_id_shop_customers',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_comments'),
    )
    op.create_index('ix_comments_commentable', 'comments', ['commentable_type', 'commentable_id'])

    op.create_table(
        'blog_categories',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_visible', sa.Boolean(), nullable=False),
        *_seo(),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_blog_categories'),
        sa.UniqueConstraint('slug', name='uq_blog_categories_slug'),
    )

    op.create_table(
        'blog_authors',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('photo', sa.String(255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('github_handle', sa.String(255), nullable=True),
        sa.Column('twitter_handle', sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_blog_authors'),
        sa.UniqueConstraint('email', name='uq_blog_authors_email'),
    )

    op.create_table(
        'blog_posts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('blog_author_id', sa.Uuid(), nullable=True),
        sa.Column('blog_category_id', sa.Uuid(), nullable=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('published_at', sa.Date(), nullable=True),
        sa.Column('image', sa.String(255), nullable=True),
        *_seo(),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['blog_author_id'], ['blog_authors.id'],
            name='fk_blog_posts_blog_author_id_blog_authors',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['blog_category_id'], ['blog_categories.id'],
            name='fk_blog_posts_blog_category_id_blog_categories',
            ondelete='SET NULL',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_blog_posts'),
        sa.UniqueConstraint('slug', name='uq_blog_posts_slug'),
    )

    op.create_table(
        'notifications',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('type', sa.String(100), nullable=False),
        sa.Column('notifiable_type', sa.String(50), nullable=False),
        sa.Column('notifiable_id', sa.Uuid(), nullable=False),
        sa.Column('data', sa.JSON(), nullable=False),
        sa.Column('read_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_notifications'),
    )
    op.create_index('ix_notifications_notifiable', 'notifications', ['notifiable_type', 'notifiable_id'])


def downgrade() -> None:
    op.drop_index('ix_notifications_notifiable', table_name='notifications')
    op.drop_table('notifications')
    op.drop_table('blog_posts')
    op.drop_table('blog_authors')
    op.drop_table('blog_categories')
    op.drop_index('ix_comments_commentable', table_name='comments')
    op.drop_table('comments')
    op.drop_table('shop_payments')
    op.drop_table('shop_order_items')
    op.drop_table('shop_orders')
    op.drop_table('shop_category_product')
    op.drop_table('shop_products')
    op.drop_table('shop_customers')
    op.drop_table('shop_categories')
    op.drop_table('shop_brands')
    op.drop_index('ix_addresses_addressable', table_name='addresses')
    op.drop_table('addresses')
    op.drop_table('users')
