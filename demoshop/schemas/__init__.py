from demoshop.schemas.notification import NotificationAction, NotificationData

__all__ = ["NotificationAction", "NotificationData"]
