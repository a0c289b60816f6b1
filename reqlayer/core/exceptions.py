"""
网络层异常定义

注意：传输层异常（httpx.HTTPError 及其子类）不在此包装，
分类提示后原样抛出，调用方可以直接按 httpx 异常类型分支处理。
"""

from __future__ import annotations


class ReqLayerError(Exception):
    """网络层基础异常"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ConfigurationError(ReqLayerError):
    """配置无效"""

    pass


class UnsupportedMethodError(ReqLayerError, ValueError):
    """不支持的请求方法（仅支持 get/post/put/delete）"""

    def __init__(self, method: object):
        super().__init__(f"不支持的请求方法: {method!r}")
        self.method = method


__all__ = ["ReqLayerError", "ConfigurationError", "UnsupportedMethodError"]
