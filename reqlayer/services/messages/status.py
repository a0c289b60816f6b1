"""
HTTP 状态码提示文案
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

STATUS_MESSAGES: Mapping[int, str] = MappingProxyType(
    {
        400: "请求出错",
        401: "未授权，请重新登录",
        403: "拒绝访问",
        404: "请求错误，未找到该资源",
        408: "请求超时",
        500: "服务器内部错误",
        501: "服务未实现",
        502: "网关错误",
        503: "服务不可用",
        504: "网关超时",
        505: "HTTP版本不受支持",
    }
)

TIMEOUT_MESSAGE = "请求超时"
CONNECTION_FAILED_MESSAGE = "连接服务器失败"


def status_message(status_code: int) -> str | None:
    """状态码对应的提示，表外状态码返回 None"""
    return STATUS_MESSAGES.get(status_code)
