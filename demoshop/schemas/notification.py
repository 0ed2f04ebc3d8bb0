"""Pydantic schemas for the JSON payload stored in ``notifications.data``."""

from pydantic import BaseModel, ConfigDict, Field


class NotificationAction(BaseModel):
    """A button rendered under the notification body."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "View",
                "label": "View",
                "url": "http://localhost:8000/admin/shop/orders/7f3e1b2a-8c4d-4e5f-9a6b-1c2d3e4f5a6b/edit",
                "should_open_url_in_new_tab": False,
            }
        }
    )

    name: str = Field(..., max_length=50)
    label: str | None = None
    url: str | None = None
    should_open_url_in_new_tab: bool = False


class NotificationData(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "New order",
                "body": "Jane Doe ordered 3 products.",
                "icon": "heroicon-o-shopping-bag",
                "icon_color": None,
                "status": None,
                "duration": "persistent",
                "actions": [{"name": "View", "label": "View", "url": "..."}],
                "format": "filament",
            }
        }
    )

    title: str = Field(..., max_length=255)
    body: str | None = None
    icon: str | None = None
    icon_color: str | None = None
    status: str | None = None
    duration: str = "persistent"
    actions: list[NotificationAction] = []
    format: str = "filament"
