"""
提示消息模板

由固定的动作词表与三段后缀组合生成，每个操作类型对应一组
加载/成功/失败文案。模板在导入时构建一次，之后只读。
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from reqlayer.core.enums import ActionType
from reqlayer.models.options import MessageOverride, MessageTemplate

BASE_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "loading": "中...",
        "success": "成功",
        "error": "失败",
    }
)

ACTION_VERBS: Mapping[str, str] = MappingProxyType(
    {
        ActionType.ADD.value: "添加",
        ActionType.UPDATE.value: "修改",
        ActionType.DELETE.value: "删除",
        ActionType.RESET.value: "重置",
        ActionType.DISTRIBUTION.value: "分配",
        ActionType.VERIFY.value: "验证",
        ActionType.LOGIN.value: "登录",
        ActionType.PRINT.value: "打印",
        ActionType.SAVE.value: "保存",
        ActionType.SET.value: "设置",
        ActionType.QUERY.value: "查询",
        ActionType.RETURN.value: "退回",
        ActionType.NC.value: "NC",
        ActionType.REPORT.value: "报工",
        ActionType.DOWNLOAD.value: "下载",
        ActionType.DEFAULT.value: "操作",
    }
)


def _build_templates(
    verbs: Mapping[str, str], suffixes: Mapping[str, str]
) -> Mapping[str, MessageTemplate]:
    return MappingProxyType(
        {
            action: MessageTemplate(
                loading_message=f"{verb}{suffixes['loading']}",
                success_message=f"{verb}{suffixes['success']}",
                error_message=f"{verb}{suffixes['error']}",
            )
            for action, verb in verbs.items()
        }
    )


class MessageCatalog:
    """操作类型 -> 提示模板 的只读映射"""

    def __init__(
        self,
        verbs: Mapping[str, str] = ACTION_VERBS,
        suffixes: Mapping[str, str] = BASE_MESSAGES,
    ):
        if ActionType.DEFAULT.value not in verbs:
            raise ValueError("动作词表必须包含 default")
        self._templates = _build_templates(verbs, suffixes)
        self._default = self._templates[ActionType.DEFAULT.value]

    @staticmethod
    def _key(action_type: ActionType | str | None) -> str | None:
        if isinstance(action_type, ActionType):
            return action_type.value
        return action_type

    def resolve(self, action_type: ActionType | str | None) -> MessageTemplate:
        """获取操作类型对应的模板，未知类型回退到 default"""
        key = self._key(action_type)
        if not isinstance(key, str):
            return self._default
        return self._templates.get(key, self._default)

    def merge(
        self,
        action_type: ActionType | str | None,
        override: MessageOverride | None = None,
    ) -> MessageTemplate:
        """
        合并显式文案与模板

        override 中非 None 的字段优先，其余取模板值。
        """
        template = self.resolve(action_type)
        if override is None:
            return template
        return MessageTemplate(
            loading_message=(
                override.loading_message
                if override.loading_message is not None
                else template.loading_message
            ),
            success_message=(
                override.success_message
                if override.success_message is not None
                else template.success_message
            ),
            error_message=(
                override.error_message
                if override.error_message is not None
                else template.error_message
            ),
        )

    @property
    def templates(self) -> Mapping[str, MessageTemplate]:
        return self._templates

    def __contains__(self, action_type: object) -> bool:
        key = self._key(action_type)  # type: ignore[arg-type]
        return isinstance(key, str) and key in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


# 进程级单例
message_catalog = MessageCatalog()


__all__ = ["ACTION_VERBS", "BASE_MESSAGES", "MessageCatalog", "message_catalog"]
