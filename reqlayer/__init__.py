"""
reqlayer - 客户端统一网络访问层

对外提供:
- HttpApi: 组装好的请求入口（get/post/put/delete/async_request）
- message_catalog: 按操作类型生成的提示消息模板
"""

from reqlayer.clients.api_client import HttpApi
from reqlayer.config.settings import HttpSettings
from reqlayer.core.enums import ActionType, CallbackTriggerWay, HttpMethod, MsgBackType
from reqlayer.models.envelope import ResponseEnvelope
from reqlayer.models.options import MessageOverride, MessageTemplate, RequestOptions
from reqlayer.services.messages.catalog import MessageCatalog, message_catalog
from reqlayer.services.notification.notifier import LoggingNotifier, Notifier

__all__ = [
    "HttpApi",
    "HttpSettings",
    "ActionType",
    "CallbackTriggerWay",
    "HttpMethod",
    "MsgBackType",
    "ResponseEnvelope",
    "MessageOverride",
    "MessageTemplate",
    "RequestOptions",
    "MessageCatalog",
    "message_catalog",
    "LoggingNotifier",
    "Notifier",
]
