"""InlineAdapter: 設定に直接書かれた HTML データ（または生の値）をそのまま渡す."""

from typing import Any

from .base_adapter import BaseAdapter


class InlineAdapter(BaseAdapter):
    def __init__(self, value: Any) -> None:
        self.value = value
        if isinstance(value, str):
            self.label = repr(value if len(value) <= 60 else value[:57] + "...")

    def read(self) -> Any:
        return self.value
