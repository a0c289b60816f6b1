"""
响应信封模型

后端统一返回 {code, message?, data}，code == 200 表示业务成功。
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from reqlayer.config.constants import SUCCESS_CODE


class ResponseEnvelope(BaseModel):
    """解码后的响应体"""

    code: int | None = Field(None, description="业务状态码，200 为成功")
    message: str | None = Field(None, description="后端返回的提示消息")
    data: Any = Field(None, description="业务数据")

    model_config = ConfigDict(extra="allow")

    @property
    def is_success(self) -> bool:
        return self.code == SUCCESS_CODE

    def without_data(self) -> "ResponseEnvelope":
        """业务失败时清除 data，避免调用方拿到不完整的数据"""
        return self.model_copy(update={"data": None})

    @classmethod
    def from_body(cls, body: Any) -> "ResponseEnvelope":
        """
        从解码后的响应体构建

        非对象响应体（数组、纯文本等）没有 code，按业务失败处理，原始内容放在 data 中。
        code 无法转为整数时同样视为缺失。
        """
        if not isinstance(body, dict):
            return cls(code=None, message=None, data=body)

        payload = dict(body)
        code = _coerce_code(payload.pop("code", None))
        message = payload.pop("message", None)
        if message is not None and not isinstance(message, str):
            message = str(message)
        return cls(code=code, message=message, **payload)


def _coerce_code(value: Any) -> int | None:
    """
    将业务码转为整数

    只接受整数值：200、200.0、"200"、"200.0" 均为 200；
    200.5、"abc"、布尔值等无法精确表示为整数的值视为缺失，不做截断。
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None
