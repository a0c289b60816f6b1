"""
统一日志系统 - 基于 loguru

日志级别策略:
- DEBUG: 请求发起、鉴权注入、响应解包等执行细节
- INFO:  客户端创建/关闭
- WARNING: 传输失败、业务失败、凭据读取异常

网络层作为库使用，导入时不修改 loguru 的 sink，
由应用启动时调用 setup_logging() 完成配置。

使用方式:
    from reqlayer.core.logger import logger, setup_logging

    setup_logging()            # 应用入口调用一次
    logger.info("消息")
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from loguru import logger

# ============================================================================
# 日志格式定义
# ============================================================================

CONSOLE_FORMAT_DEV = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{message}</cyan>"
)

CONSOLE_FORMAT_PROD = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def _default_level() -> str:
    return os.getenv("LOG_LEVEL", "DEBUG").upper()


def setup_logging(
    level: str | None = None,
    *,
    log_dir: str | Path | None = None,
    production: bool = False,
) -> None:
    """
    配置 loguru 输出

    Args:
        level: 控制台日志级别，默认读取 LOG_LEVEL（缺省 DEBUG）
        log_dir: 文件日志目录，为 None 时不写文件
        production: 生产模式使用无颜色格式并关闭 backtrace/diagnose
    """
    console_level = (level or _default_level()).upper()

    logger.remove()

    if production:
        logger.add(
            sys.stdout,
            format=CONSOLE_FORMAT_PROD,
            level=console_level,
            colorize=False,
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stdout,
            format=CONSOLE_FORMAT_DEV,
            level=console_level,
            colorize=True,
        )

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_log_config = {
            "format": FILE_FORMAT,
            "rotation": "100 MB",
            "retention": "30 days",
            "compression": "gz",
            "enqueue": False,
            "encoding": "utf-8",
            "catch": True,
        }
        if production:
            file_log_config["backtrace"] = False
            file_log_config["diagnose"] = False

        # 主日志文件 - 所有级别
        logger.add(  # type: ignore[call-overload]
            log_path / "app.log",
            level="DEBUG",
            **file_log_config,
        )

        # 错误日志文件 - 仅 ERROR 及以上
        error_log_config = file_log_config.copy()
        error_log_config["rotation"] = "50 MB"
        logger.add(  # type: ignore[call-overload]
            log_path / "error.log",
            level="ERROR",
            **error_log_config,
        )

    # 禁用第三方库噪音日志
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


__all__ = ["logger", "setup_logging"]
