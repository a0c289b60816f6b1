"""
网络层入口

组装 TransportAdapter / RequestDispatcher / AsyncOrchestrator，
对外提供 get/post/put/delete/async_request。

用法:
    async with HttpApi(HttpSettings(base_url="https://api.example.com"),
                       credential_provider=token_store.get_token,
                       notifier=toast_notifier) as api:
        res = await api.post("/login", {"username": u, "password": p}, msg_type="login")
        if res.code == 200:
            ...
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from reqlayer.clients.http_client import CredentialProvider, TransportAdapter
from reqlayer.config.settings import HttpSettings
from reqlayer.core.enums import ActionType, CallbackTriggerWay, HttpMethod
from reqlayer.models.envelope import ResponseEnvelope
from reqlayer.models.options import MessageOverride, RequestOptions
from reqlayer.services.dispatch.dispatcher import RequestDispatcher
from reqlayer.services.messages.catalog import MessageCatalog, message_catalog
from reqlayer.services.notification.notifier import LoggingNotifier, Notifier
from reqlayer.services.orchestration.orchestrator import AsyncOrchestrator, CompletionCallback


class HttpApi:
    """统一请求入口"""

    def __init__(
        self,
        settings: HttpSettings | None = None,
        credential_provider: CredentialProvider | None = None,
        notifier: Notifier | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        catalog: MessageCatalog = message_catalog,
    ):
        self.settings = settings or HttpSettings()
        self.notifier: Notifier = notifier or LoggingNotifier()
        self.transport = TransportAdapter.configure(
            self.settings.base_url,
            self.settings.timeout_seconds,
            credential_provider,
            self.notifier,
            transport=transport,
            headers={"Content-Type": self.settings.content_type},
            limits=httpx.Limits(
                max_connections=self.settings.max_connections,
                max_keepalive_connections=self.settings.keepalive_connections,
            ),
        )
        self.dispatcher = RequestDispatcher(self.transport, self.notifier, catalog)
        self.orchestrator = AsyncOrchestrator(self.dispatcher, self.notifier, catalog)

    async def request(
        self,
        method: HttpMethod | str,
        url: str,
        data: Any = None,
        config: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope:
        return await self.dispatcher.request(method, url, data, config, options)

    async def get(
        self,
        url: str,
        data: Any = None,
        config: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> ResponseEnvelope:
        return await self.dispatcher.get(url, data, config, **options)

    async def post(
        self,
        url: str,
        data: Any = None,
        config: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> ResponseEnvelope:
        return await self.dispatcher.post(url, data, config, **options)

    async def put(
        self,
        url: str,
        data: Any = None,
        config: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> ResponseEnvelope:
        return await self.dispatcher.put(url, data, config, **options)

    async def delete(
        self,
        url: str,
        data: Any = None,
        config: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> ResponseEnvelope:
        return await self.dispatcher.delete(url, data, config, **options)

    async def async_request(
        self,
        method: HttpMethod | str,
        url: str,
        data: Any = None,
        msg_type: ActionType | str | None = None,
        *,
        config: Mapping[str, Any] | None = None,
        callback_fn: CompletionCallback | None = None,
        callback_trigger_way: CallbackTriggerWay | str = CallbackTriggerWay.SUCCESS,
        message: MessageOverride | Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        return await self.orchestrator.async_request(
            method,
            url,
            data,
            msg_type,
            config=config,
            callback_fn=callback_fn,
            callback_trigger_way=callback_trigger_way,
            message=message,
        )

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "HttpApi":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


__all__ = ["HttpApi"]
