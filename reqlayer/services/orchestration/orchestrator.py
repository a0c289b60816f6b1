"""
异步请求编排

在一次请求外包裹加载提示与完成回调：
1. 解析文案（显式文案 > 模板），包括加载文案
2. 加载提示作用域内调用分发器（need_msg=False，关闭分发器自身提示）
3. 作用域结束后按结果只提示一次成功或失败
4. 按触发方式决定是否调用回调
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from reqlayer.core.enums import ActionType, CallbackTriggerWay, HttpMethod
from reqlayer.core.logger import logger
from reqlayer.models.envelope import ResponseEnvelope
from reqlayer.models.options import MessageOverride
from reqlayer.services.dispatch.dispatcher import RequestDispatcher
from reqlayer.services.messages.catalog import MessageCatalog
from reqlayer.services.notification.notifier import Notifier

CompletionCallback = Callable[[ResponseEnvelope], Any]


def should_trigger(way: CallbackTriggerWay | str, envelope: ResponseEnvelope) -> bool:
    """根据触发方式判断是否调用回调"""
    trigger_way = CallbackTriggerWay(way)
    if trigger_way is CallbackTriggerWay.ANY:
        return True
    if trigger_way is CallbackTriggerWay.SUCCESS:
        return envelope.is_success
    return not envelope.is_success


class AsyncOrchestrator:
    """带加载提示与回调的请求编排器"""

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        notifier: Notifier,
        catalog: MessageCatalog | None = None,
    ):
        self._dispatcher = dispatcher
        self._notifier = notifier
        self._catalog = catalog or dispatcher.catalog

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
        """
        发起编排请求

        Args:
            method: 请求方法
            url: 请求地址
            data: 请求数据
            msg_type: 操作类型
            config: 额外的 httpx 请求参数
            callback_fn: 完成回调，接收响应信封，可为协程函数
            callback_trigger_way: success / error / any
            message: 显式文案（loading/success/error）

        Returns:
            分发器返回的响应信封

        Raises:
            httpx.HTTPError: 传输失败（加载提示已关闭）
        """
        trigger_way = CallbackTriggerWay(callback_trigger_way)
        handler = self._dispatcher.handler(method)
        final_message = self._catalog.merge(msg_type, MessageOverride.from_value(message))

        async with self._notifier.loading(final_message.loading_message):
            envelope = await handler(url, data, config, need_msg=False)

        if envelope.is_success:
            self._notifier.success(envelope.message or final_message.success_message)
        else:
            self._notifier.error(envelope.message or final_message.error_message)

        if callback_fn is not None and should_trigger(trigger_way, envelope):
            logger.debug("触发完成回调: way={}, code={}", trigger_way.value, envelope.code)
            result = callback_fn(envelope)
            if inspect.isawaitable(result):
                await result

        return envelope
