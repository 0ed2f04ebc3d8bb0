"""Tests for database notifications sent to admin-panel users."""

import uuid

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from demoshop.models import Notification
from demoshop.schemas.notification import NotificationData
from demoshop.services.notifications import (
    DATABASE_NOTIFICATION_TYPE,
    new_order_notification,
    order_edit_url,
    send_database_notification,
)
from seed.factories import OrderFactory, UserFactory


def test_order_edit_url_strips_trailing_slash() -> None:
    order = OrderFactory.build()
    url = order_edit_url(order, "http://admin.test/admin/")
    assert url == f"http://admin.test/admin/shop/orders/{order.id}/edit"


def test_order_edit_url_defaults_to_configured_admin_url() -> None:
    order = OrderFactory.build()
    assert order_edit_url(order).startswith("http://localhost:8000/admin/shop/orders/")


def test_new_order_notification_payload() -> None:
    order = OrderFactory.build()
    data = new_order_notification(order, "Jane Doe", 3, admin_url="http://admin.test/admin")

    assert data.title == "New order"
    assert data.icon == "heroicon-o-shopping-bag"
    assert data.body == "Jane Doe ordered 3 products."
    assert data.duration == "persistent"
    assert [action.name for action in data.actions] == ["View"]
    assert data.actions[0].url == f"http://admin.test/admin/shop/orders/{order.id}/edit"


@pytest.mark.asyncio
async def test_send_database_notification_persists_row(session: AsyncSession) -> None:
    user = UserFactory.build(password_hash="x")
    session.add(user)
    await session.flush()

    data = NotificationData(title="Backup finished", body="All good.")
    notification = await send_database_notification(session, notifiable=user, data=data)

    result = await session.execute(
        select(
            Notification.type,
            Notification.notifiable_type,
            Notification.notifiable_id,
            Notification.data,
            Notification.read_at,
        ).where(Notification.id == notification.id)
    )
    row = result.one()
    assert isinstance(notification.id, uuid.UUID)
    assert row.type == DATABASE_NOTIFICATION_TYPE
    assert row.notifiable_type == "users"
    assert row.notifiable_id == user.id
    assert row.data["title"] == "Backup finished"
    assert row.data["actions"] == []
    assert row.read_at is None
