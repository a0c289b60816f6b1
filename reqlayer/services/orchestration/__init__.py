"""
Orchestration 模块

- AsyncOrchestrator: 加载提示 + 单次结果提示 + 完成回调
"""

from .orchestrator import AsyncOrchestrator, should_trigger

__all__ = ["AsyncOrchestrator", "should_trigger"]
