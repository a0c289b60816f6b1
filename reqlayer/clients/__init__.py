"""
HTTP 客户端模块
"""

from reqlayer.clients.http_client import CredentialProvider, TransportAdapter

__all__ = ["CredentialProvider", "TransportAdapter"]
