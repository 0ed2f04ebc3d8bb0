from demoshop.services.auth import hash_password, verify_password
from demoshop.services.notifications import send_database_notification
from demoshop.services.storage import delete_directory

__all__ = [
    "delete_directory",
    "hash_password",
    "send_database_notification",
    "verify_password",
]
