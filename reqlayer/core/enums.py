"""
网络层枚举定义

- ActionType: 操作类型，决定提示消息模板
- MsgBackType: 请求完成后回显哪类消息
- CallbackTriggerWay: 编排请求完成后何时触发回调
- HttpMethod: 支持的请求方法
"""

from __future__ import annotations

from enum import Enum

from reqlayer.core.exceptions import UnsupportedMethodError


class ActionType(str, Enum):
    """操作类型 - 决定加载/成功/失败提示文案"""

    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"
    RESET = "reset"
    DISTRIBUTION = "distribution"  # 分配
    VERIFY = "verify"
    LOGIN = "login"
    PRINT = "print"
    SAVE = "save"
    SET = "set"
    QUERY = "query"
    RETURN = "return"  # 退回
    NC = "nc"
    REPORT = "report"  # 报工
    DOWNLOAD = "download"
    DEFAULT = "default"


class MsgBackType(str, Enum):
    """消息回显方式"""

    ALL = "all"
    SUCCESS = "success"
    ERROR = "error"


class CallbackTriggerWay(str, Enum):
    """回调触发方式"""

    SUCCESS = "success"
    ERROR = "error"
    ANY = "any"


class HttpMethod(str, Enum):
    """请求方法"""

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: "HttpMethod | str") -> "HttpMethod":
        """解析请求方法（大小写不敏感）"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedMethodError(value)


__all__ = ["ActionType", "MsgBackType", "CallbackTriggerWay", "HttpMethod"]
