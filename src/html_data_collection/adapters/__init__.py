"""customHtmlData ソース用のアダプタ群."""

from pathlib import Path
from typing import Any

from loguru import logger

from .base_adapter import BaseAdapter
from .inline_adapter import InlineAdapter
from .json_adapter import JSON_Adapter


def _is_existing_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        # 長すぎる生文字列など、パスとして解釈できない値
        return False


def resolve_source(source: Any) -> BaseAdapter:
    """customHtmlData の1要素に対応するアダプタを選ぶ.

    文字列が既存ファイルを指していれば JSON_Adapter、それ以外（dict や
    ファイルでない文字列）は InlineAdapter でそのまま渡します。

    Args:
        source: インライン dict、ファイルパス文字列、または生の文字列

    Returns:
        アダプタ
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        logger.debug(f"Resolving customHtmlData source {source!r} (absolute={path.absolute()}, cwd={Path.cwd()})")
        if _is_existing_file(path):
            return JSON_Adapter(path)
        if isinstance(source, Path):
            raise FileNotFoundError(f"JSON file not found: {path}")
    return InlineAdapter(source)


__all__ = [
    "BaseAdapter",
    "InlineAdapter",
    "JSON_Adapter",
    "resolve_source",
]
