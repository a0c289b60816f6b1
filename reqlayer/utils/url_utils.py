"""
URL 工具函数
"""

from __future__ import annotations

import re

# URL 中需要脱敏的查询参数（正则模式）
_SENSITIVE_QUERY_PARAMS_PATTERN = re.compile(
    r"([?&])(key|api_key|apikey|token|access_token|secret|password|credential)=([^&]*)",
    re.IGNORECASE,
)


def redact_url_for_log(url: object) -> str:
    """
    对 URL 中的敏感查询参数进行脱敏，用于日志记录

    将 ?token=xxx 替换为 ?token=***

    Args:
        url: 原始 URL（str 或 httpx.URL）

    Returns:
        脱敏后的 URL
    """
    return _SENSITIVE_QUERY_PARAMS_PATTERN.sub(r"\1\2=***", str(url))
