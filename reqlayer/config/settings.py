"""
HTTP 网络层配置

网络层本身不读取环境变量，base_url / timeout 由应用配置注入。
支持两种来源：
- 前端风格的全局配置: {"Http": {"BaseUrl": "...", "Timeout": 10}}
- 扁平配置: {"base_url": "...", "timeout_seconds": 10}
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import AliasChoices, AliasPath, BaseModel, ConfigDict, Field, ValidationError

from reqlayer.config.constants import HttpDefaults
from reqlayer.core.exceptions import ConfigurationError


class HttpSettings(BaseModel):
    """HTTP 客户端配置"""

    base_url: str = Field(
        HttpDefaults.BASE_URL,
        validation_alias=AliasChoices(AliasPath("Http", "BaseUrl"), "base_url"),
        description="请求基础地址",
    )
    timeout_seconds: float = Field(
        HttpDefaults.TIMEOUT_SECONDS,
        gt=0,
        validation_alias=AliasChoices(AliasPath("Http", "Timeout"), "timeout_seconds"),
        description="请求超时（秒）",
    )
    content_type: str = Field(HttpDefaults.CONTENT_TYPE, description="默认 Content-Type")
    max_connections: int = Field(HttpDefaults.MAX_CONNECTIONS, gt=0, description="最大连接数")
    keepalive_connections: int = Field(
        HttpDefaults.KEEPALIVE_CONNECTIONS, ge=0, description="最大保活连接数"
    )

    model_config = ConfigDict(frozen=True, extra="ignore")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(f"无效的 HTTP 配置: {details}") from e

    @classmethod
    def from_mapping(cls, app_config: Mapping[str, Any] | None) -> "HttpSettings":
        """
        从应用配置构建

        优先读取 Http.BaseUrl / Http.Timeout，缺失时回退到扁平键，再回退到默认值。
        """
        return cls(**dict(app_config or {}))
