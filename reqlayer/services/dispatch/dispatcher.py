"""
请求分发器

request() 是唯一的请求原语，get/post/put/delete 为带默认提示策略的快捷方法：
默认 need_msg=True、msg_back_type="error"，即只在业务失败时提示。

业务失败（code != 200）不抛异常，作为正常返回值返回并清除 data；
传输失败（网络/超时/非 2xx）由 TransportAdapter 提示后原样抛出，此处不捕获。
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping

from reqlayer.clients.http_client import TransportAdapter
from reqlayer.config.constants import HttpDefaults
from reqlayer.core.enums import ActionType, HttpMethod, MsgBackType
from reqlayer.core.logger import logger
from reqlayer.models.envelope import ResponseEnvelope
from reqlayer.models.options import MessageOverride, MessageTemplate, RequestOptions
from reqlayer.services.messages.catalog import MessageCatalog, message_catalog
from reqlayer.services.notification.notifier import Notifier
from reqlayer.utils.url_utils import redact_url_for_log

VerbHandler = Callable[..., Awaitable[ResponseEnvelope]]


def build_request_kwargs(
    method: HttpMethod,
    data: Any = None,
    config: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    构建 httpx 请求参数

    GET 请求的 data 作为查询参数；其他方法中字典作为表单体，str/bytes 作为原始请求体，
    其余类型（数组、数字、布尔值）按 JSON 编码并覆盖默认的表单 Content-Type。
    config 中的参数最后合并，可覆盖前面的值；config.headers 与 JSON 请求头合并。
    """
    kwargs: dict[str, Any] = {}
    extra = dict(config or {})
    if data is not None:
        if method is HttpMethod.GET:
            kwargs["params"] = data
        elif isinstance(data, (str, bytes)):
            kwargs["content"] = data
        elif isinstance(data, Mapping):
            kwargs["data"] = data
        else:
            kwargs["json"] = data
            kwargs["headers"] = {
                "Content-Type": HttpDefaults.JSON_CONTENT_TYPE,
                **dict(extra.pop("headers", None) or {}),
            }
    kwargs.update(extra)
    return kwargs


class RequestDispatcher:
    """请求分发器"""

    def __init__(
        self,
        transport: TransportAdapter,
        notifier: Notifier,
        catalog: MessageCatalog = message_catalog,
    ):
        self._transport = transport
        self._notifier = notifier
        self._catalog = catalog
        self._handlers: dict[HttpMethod, VerbHandler] = {
            HttpMethod.GET: self.get,
            HttpMethod.POST: self.post,
            HttpMethod.PUT: self.put,
            HttpMethod.DELETE: self.delete,
        }

    @property
    def catalog(self) -> MessageCatalog:
        return self._catalog

    def handler(self, method: HttpMethod | str) -> VerbHandler:
        """获取请求方法对应的快捷方法"""
        return self._handlers[HttpMethod.parse(method)]

    async def request(
        self,
        method: HttpMethod | str,
        url: str,
        data: Any = None,
        config: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope:
        """
        发起请求并按提示策略处理结果

        Args:
            method: 请求方法 get/post/put/delete
            url: 请求地址
            data: GET 时为查询参数，其他方法为请求体
            config: 额外的 httpx 请求参数（headers、timeout 等）
            options: 提示策略，默认不提示

        Returns:
            响应信封；业务失败时 data 为 None

        Raises:
            httpx.HTTPError: 传输失败
        """
        http_method = HttpMethod.parse(method)
        options = options or RequestOptions()

        # 不需要提示时跳过模板解析
        final_message: MessageTemplate | None = None
        if options.need_msg:
            final_message = self._catalog.merge(options.msg_type, options.message)

        envelope = await self._transport.send(
            http_method.value, url, **build_request_kwargs(http_method, data, config)
        )

        if envelope.is_success:
            if final_message is not None and options.shows_success:
                self._notifier.success(envelope.message or final_message.success_message)
            return envelope

        logger.debug(
            "业务失败: {} {} code={} message={}",
            http_method.value.upper(),
            redact_url_for_log(url),
            envelope.code,
            envelope.message,
        )
        if final_message is not None and options.shows_error:
            self._notifier.error(envelope.message or final_message.error_message)
        return envelope.without_data()

    async def _verb(
        self,
        method: HttpMethod,
        url: str,
        data: Any,
        config: Mapping[str, Any] | None,
        need_msg: bool,
        msg_back_type: MsgBackType | str,
        msg_type: ActionType | str | None,
        message: MessageOverride | Mapping[str, Any] | None,
    ) -> ResponseEnvelope:
        options = RequestOptions(
            need_msg=need_msg,
            msg_back_type=msg_back_type,
            msg_type=msg_type,
            message=message,
        )
        return await self.request(method, url, data, config, options)

    async def get(
        self,
        url: str,
        data: Any = None,
        config: Mapping[str, Any] | None = None,
        *,
        need_msg: bool = True,
        msg_back_type: MsgBackType | str = MsgBackType.ERROR,
        msg_type: ActionType | str | None = ActionType.QUERY,
        message: MessageOverride | Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        return await self._verb(
            HttpMethod.GET, url, data, config, need_msg, msg_back_type, msg_type, message
        )

    async def post(
        self,
        url: str,
        data: Any = None,
        config: Mapping[str, Any] | None = None,
        *,
        need_msg: bool = True,
        msg_back_type: MsgBackType | str = MsgBackType.ERROR,
        msg_type: ActionType | str | None = ActionType.QUERY,
        message: MessageOverride | Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        return await self._verb(
            HttpMethod.POST, url, data, config, need_msg, msg_back_type, msg_type, message
        )

    async def put(
        self,
        url: str,
        data: Any = None,
        config: Mapping[str, Any] | None = None,
        *,
        need_msg: bool = True,
        msg_back_type: MsgBackType | str = MsgBackType.ERROR,
        msg_type: ActionType | str | None = ActionType.QUERY,
        message: MessageOverride | Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        return await self._verb(
            HttpMethod.PUT, url, data, config, need_msg, msg_back_type, msg_type, message
        )

    async def delete(
        self,
        url: str,
        data: Any = None,
        config: Mapping[str, Any] | None = None,
        *,
        need_msg: bool = True,
        msg_back_type: MsgBackType | str = MsgBackType.ERROR,
        msg_type: ActionType | str | None = ActionType.DELETE,
        message: MessageOverride | Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        return await self._verb(
            HttpMethod.DELETE, url, data, config, need_msg, msg_back_type, msg_type, message
        )
