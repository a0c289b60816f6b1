"""
配置模块
"""

from reqlayer.config.constants import HttpDefaults
from reqlayer.config.settings import HttpSettings

__all__ = ["HttpDefaults", "HttpSettings"]
