"""
用户提示能力接口

网络层只依赖 Notifier 协议，不关心提示如何渲染（Toast、弹窗、日志等）。
- success / error: 一次性提示
- loading: 作用域加载提示，退出作用域时必定关闭
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Protocol, runtime_checkable

from reqlayer.core.logger import logger


@runtime_checkable
class Notifier(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def loading(self, message: str) -> AsyncContextManager[None]: ...


class LoggingNotifier:
    """
    基于日志的默认提示实现

    未接入界面时使用，所有提示写入 loguru。
    """

    def success(self, message: str) -> None:
        logger.info("[提示] {}", message)

    def error(self, message: str) -> None:
        logger.warning("[错误] {}", message)

    @asynccontextmanager
    async def loading(self, message: str) -> AsyncIterator[None]:
        start_time = time.monotonic()
        logger.debug("[加载] {}", message)
        try:
            yield
        finally:
            elapsed_ms = int((time.monotonic() - start_time) * 1000)
            logger.debug("[加载结束] {} ({}ms)", message, elapsed_ms)


__all__ = ["Notifier", "LoggingNotifier"]
