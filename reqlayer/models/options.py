"""
请求选项与消息模板
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from reqlayer.core.enums import ActionType, MsgBackType

# 兼容前端风格的驼峰键
_CAMEL_KEYS = {
    "loadingMessage": "loading_message",
    "successMessage": "success_message",
    "errorMessage": "error_message",
}


@dataclass(frozen=True)
class MessageTemplate:
    """加载/成功/失败提示文案"""

    loading_message: str
    success_message: str
    error_message: str


@dataclass(frozen=True)
class MessageOverride:
    """调用方显式指定的提示文案，None 表示沿用模板"""

    loading_message: str | None = None
    success_message: str | None = None
    error_message: str | None = None

    @classmethod
    def from_value(
        cls, value: "MessageOverride | Mapping[str, Any] | None"
    ) -> "MessageOverride | None":
        if value is None or isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(f"message 必须是 MessageOverride 或字典: {type(value).__name__}")

        fields: dict[str, Any] = {}
        for key, item in value.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in ("loading_message", "success_message", "error_message"):
                raise TypeError(f"未知的 message 字段: {key}")
            fields[name] = item
        return cls(**fields)


@dataclass(frozen=True)
class RequestOptions:
    """
    单次请求的提示策略

    - need_msg: 是否显示提示
    - msg_back_type: 显示哪类提示（all/success/error）
    - msg_type: 操作类型，决定默认文案
    - message: 显式文案，逐字段优先于模板
    """

    need_msg: bool = False
    msg_back_type: MsgBackType = MsgBackType.ALL
    msg_type: ActionType | str | None = None
    message: MessageOverride | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "msg_back_type", MsgBackType(self.msg_back_type))
        object.__setattr__(self, "message", MessageOverride.from_value(self.message))

    @property
    def shows_success(self) -> bool:
        return self.need_msg and self.msg_back_type in (MsgBackType.ALL, MsgBackType.SUCCESS)

    @property
    def shows_error(self) -> bool:
        return self.need_msg and self.msg_back_type in (MsgBackType.ALL, MsgBackType.ERROR)
