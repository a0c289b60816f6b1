"""
网络层数据模型
"""

from reqlayer.models.envelope import ResponseEnvelope
from reqlayer.models.options import MessageOverride, MessageTemplate, RequestOptions

__all__ = ["ResponseEnvelope", "MessageOverride", "MessageTemplate", "RequestOptions"]
