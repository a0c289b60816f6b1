"""
提示消息模块
"""

from reqlayer.services.messages.catalog import MessageCatalog, message_catalog
from reqlayer.services.messages.status import (
    CONNECTION_FAILED_MESSAGE,
    STATUS_MESSAGES,
    TIMEOUT_MESSAGE,
    status_message,
)

__all__ = [
    "MessageCatalog",
    "message_catalog",
    "STATUS_MESSAGES",
    "TIMEOUT_MESSAGE",
    "CONNECTION_FAILED_MESSAGE",
    "status_message",
]
