"""Database notifications for admin-panel users.

Notifications are rows in ``notifications`` addressed to a polymorphic
*notifiable* (currently always a ``users`` row).  The admin panel polls that
table and renders ``data`` as a toast in the notification tray.
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from demoshop.config import settings
from demoshop.models import Notification, Order, User
from demoshop.schemas.notification import NotificationAction, NotificationData

logger = logging.getLogger(__name__)

DATABASE_NOTIFICATION_TYPE = "database"


def order_edit_url(order: Order, admin_url: str | None = None) -> str:
    """Return the admin-panel URL of the order edit page."""
    base = (admin_url or settings.admin_url).rstrip("/")
    return f"{base}/shop/orders/{order.id}/edit"


def new_order_notification(
    order: Order,
    customer_name: str,
    item_count: int,
    admin_url: str | None = None,
) -> NotificationData:
    """Build the "New order" notification payload for *order*."""
    return NotificationData(
        title="New order",
        icon="heroicon-o-shopping-bag",
        body=f"{customer_name} ordered {item_count} products.",
        actions=[
            NotificationAction(
                name="View",
                label="View",
                url=order_edit_url(order, admin_url),
            )
        ],
    )


async def send_database_notification(
    db: AsyncSession,
    *,
    notifiable: User,
    data: NotificationData,
) -> Notification:
    """Persist *data* as a database notification addressed to *notifiable*.

    The row is flushed but not committed; the caller owns the transaction.
    """
    notification = Notification(
        id=uuid.uuid4(),
        type=DATABASE_NOTIFICATION_TYPE,
        notifiable_type=User.__tablename__,
        notifiable_id=notifiable.id,
        data=data.model_dump(),
    )
    db.add(notification)
    await db.flush()
    logger.debug("Sent %r notification to user %s", data.title, notifiable.id)
    return notification
