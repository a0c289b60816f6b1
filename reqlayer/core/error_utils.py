"""
错误消息处理工具函数
"""

import httpx

_TIMEOUT_MARKERS = ("timeout", "timed out")


def describe_failure(error: Exception) -> str:
    """
    获取异常的描述文本

    httpx 的部分异常（如超时）str 为空，回退到 repr。

    Args:
        error: 异常对象

    Returns:
        错误描述字符串
    """
    return str(error) or repr(error)


def is_timeout_failure(error: Exception) -> bool:
    """
    判断传输失败是否为超时

    优先按 httpx 异常类型判断，其次检查错误描述中是否包含超时字样。
    """
    if isinstance(error, httpx.TimeoutException):
        return True
    description = describe_failure(error).lower()
    return any(marker in description for marker in _TIMEOUT_MARKERS)
