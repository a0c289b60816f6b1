"""
HTTP 传输适配器

封装 httpx.AsyncClient：
1. 请求钩子：注入 Bearer 凭据
2. 响应钩子：非 2xx 状态抛出 HTTPStatusError
3. send(): 成功时解包为 ResponseEnvelope，失败时分类提示后原样抛出
"""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping, Optional

import httpx

from reqlayer.config.constants import HttpDefaults
from reqlayer.core.error_utils import describe_failure, is_timeout_failure
from reqlayer.core.logger import logger
from reqlayer.models.envelope import ResponseEnvelope
from reqlayer.services.messages.status import (
    CONNECTION_FAILED_MESSAGE,
    TIMEOUT_MESSAGE,
    status_message,
)
from reqlayer.services.notification.notifier import Notifier
from reqlayer.utils.url_utils import redact_url_for_log

CredentialProvider = Callable[[], Optional[str]]


class TransportAdapter:
    """
    传输适配器

    推荐通过 configure() 创建；调用方负责在结束时 aclose()。
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        notifier: Notifier,
        credential_provider: CredentialProvider | None = None,
    ):
        self._client = client
        self._notifier = notifier
        self._credential_provider = credential_provider

        # 钩子挂在传入的 client 上，保留其已有钩子
        hooks = self._client.event_hooks
        self._client.event_hooks = {
            "request": [*hooks.get("request", []), self._inject_auth],
            "response": [*hooks.get("response", []), self._raise_for_status],
        }

    @classmethod
    def configure(
        cls,
        base_url: str,
        timeout_seconds: float,
        credential_provider: CredentialProvider | None,
        notifier: Notifier,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        headers: Mapping[str, str] | None = None,
        limits: httpx.Limits | None = None,
    ) -> "TransportAdapter":
        """
        创建传输适配器

        Args:
            base_url: 接口基础地址
            timeout_seconds: 超时时间（秒）
            credential_provider: 返回当前用户令牌的函数，无令牌时返回空
            notifier: 失败提示
            transport: 自定义 httpx 传输层（测试时可传入 MockTransport）
            headers: 额外默认请求头
            limits: 连接池限制
        """
        default_headers = {"Content-Type": HttpDefaults.CONTENT_TYPE}
        if headers:
            default_headers.update(headers)

        client_config: dict[str, Any] = {
            "base_url": base_url or "",
            "timeout": httpx.Timeout(timeout_seconds),
            "headers": default_headers,
            "follow_redirects": True,
        }
        if limits is not None:
            client_config["limits"] = limits
        if transport is not None:
            client_config["transport"] = transport

        client = httpx.AsyncClient(**client_config)
        logger.info(
            "HTTP客户端已初始化: base_url={}, timeout={}s",
            redact_url_for_log(base_url or "<relative>"),
            timeout_seconds,
        )
        return cls(client, notifier, credential_provider)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    # ------------------------------------------------------------------
    # 钩子
    # ------------------------------------------------------------------

    def _current_token(self) -> str | None:
        if self._credential_provider is None:
            return None
        try:
            return self._credential_provider()
        except Exception as e:
            # 凭据读取失败不影响请求本身，按无令牌处理
            logger.warning("读取用户令牌失败: {}", describe_failure(e))
            return None

    async def _inject_auth(self, request: httpx.Request) -> None:
        token = self._current_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
            logger.debug("已注入鉴权头: {} {}", request.method, redact_url_for_log(request.url))

    async def _raise_for_status(self, response: httpx.Response) -> None:
        # 重定向由 httpx 跟随，只处理 4xx/5xx
        if response.is_error:
            await response.aread()
            response.raise_for_status()

    # ------------------------------------------------------------------
    # 请求
    # ------------------------------------------------------------------

    async def send(self, method: str, url: str, **kwargs: Any) -> ResponseEnvelope:
        """
        发起请求并解包响应体

        Raises:
            httpx.HTTPError: 传输失败（已完成分类提示）
        """
        logger.debug("发起请求: {} {}", method.upper(), redact_url_for_log(url))
        try:
            response = await self._client.request(method.upper(), url, **kwargs)
        except httpx.HTTPError as e:
            self._classify_failure(e)
            raise
        return self._unwrap(response)

    @staticmethod
    def _unwrap(response: httpx.Response) -> ResponseEnvelope:
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            body = response.text
        return ResponseEnvelope.from_body(body)

    def _classify_failure(self, error: httpx.HTTPError) -> None:
        """
        传输失败分类并提示（仅副作用，不吞异常）

        1. 收到 HTTP 状态码：按状态码表提示
        2. 无状态码且为超时：提示请求超时
        3. 其他：提示连接服务器失败
        """
        if isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code
            message = status_message(status_code)
            logger.warning(
                "请求失败: HTTP {} {}",
                status_code,
                redact_url_for_log(error.request.url),
            )
            if message is not None:
                self._notifier.error(message)
            return

        description = describe_failure(error)
        if is_timeout_failure(error):
            logger.warning("请求超时: {}", description)
            self._notifier.error(TIMEOUT_MESSAGE)
        else:
            logger.warning("连接服务器失败: {}", description)
            self._notifier.error(CONNECTION_FAILED_MESSAGE)

    # ------------------------------------------------------------------
    # 生命周期
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        if not self._client.is_closed:
            await self._client.aclose()
            logger.info("HTTP客户端已关闭")

    async def __aenter__(self) -> "TransportAdapter":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
