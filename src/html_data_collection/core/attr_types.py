"""HTML5 属性名 → 型の解決.

汎用の HTML データ形式では表現できない（または ANY になってしまう）属性について、
属性名だけから既知の型を返します。結果は属性名の純関数です。
"""

from __future__ import annotations

from typing import Protocol

from .types import (
    ANY_TYPE,
    BOOLEAN_TYPE,
    NUMBER_TYPE,
    STRING_TYPE,
    SimpleType,
    string_literal_union,
)

# 型ヒント: "boolean" / "number" / "string" / 文字列リテラルのタプル
TypeHint = str | tuple[str, ...]

HTML5_ATTR_TYPE_HINTS: dict[str, TypeHint] = {
    # boolean 属性
    "allowfullscreen": "boolean",
    "async": "boolean",
    "autofocus": "boolean",
    "autoplay": "boolean",
    "checked": "boolean",
    "controls": "boolean",
    "default": "boolean",
    "defer": "boolean",
    "disabled": "boolean",
    "formnovalidate": "boolean",
    "hidden": "boolean",
    "inert": "boolean",
    "ismap": "boolean",
    "itemscope": "boolean",
    "loop": "boolean",
    "multiple": "boolean",
    "muted": "boolean",
    "nomodule": "boolean",
    "novalidate": "boolean",
    "open": "boolean",
    "readonly": "boolean",
    "required": "boolean",
    "reversed": "boolean",
    "selected": "boolean",
    # 数値属性
    "cols": "number",
    "colspan": "number",
    "height": "number",
    "high": "number",
    "low": "number",
    "maxlength": "number",
    "minlength": "number",
    "optimum": "number",
    "rows": "number",
    "rowspan": "number",
    "size": "number",
    "span": "number",
    "start": "number",
    "tabindex": "number",
    "width": "number",
    # 列挙属性
    "autocapitalize": ("off", "none", "on", "sentences", "words", "characters"),
    "contenteditable": ("true", "false", "plaintext-only"),
    "dir": ("ltr", "rtl", "auto"),
    "draggable": ("true", "false"),
    "spellcheck": ("true", "false"),
    "translate": ("yes", "no"),
    # 文字列属性
    "accesskey": "string",
    "class": "string",
    "id": "string",
    "lang": "string",
    "part": "string",
    "style": "string",
    "title": "string",
}


class TypeResolver(Protocol):
    """属性名から型を解決するオラクル."""

    def has_type_for_attr_name(self, attr_name: str) -> bool: ...

    def type_for_attr_name(self, attr_name: str) -> SimpleType: ...


def hint_to_type(hint: TypeHint | None) -> SimpleType:
    """型ヒントを SimpleType に変換する（未知/None は ANY）."""
    if isinstance(hint, tuple):
        return string_literal_union(hint)
    if hint == "boolean":
        return BOOLEAN_TYPE
    if hint == "number":
        return NUMBER_TYPE
    if hint == "string":
        return STRING_TYPE
    return ANY_TYPE


def _is_event_handler_attr(attr_name: str) -> bool:
    return attr_name.startswith("on") and len(attr_name) > 2


class Html5AttrTypeResolver:
    """HTML5 の特例型テーブルに基づく TypeResolver 実装.

    Args:
        type_hints: 属性名 → 型ヒント（省略時は HTML5_ATTR_TYPE_HINTS）
    """

    def __init__(self, type_hints: dict[str, TypeHint] | None = None) -> None:
        self._type_hints = dict(HTML5_ATTR_TYPE_HINTS if type_hints is None else type_hints)

    def has_type_for_attr_name(self, attr_name: str) -> bool:
        return attr_name in self._type_hints or _is_event_handler_attr(attr_name)

    def type_for_attr_name(self, attr_name: str) -> SimpleType:
        if attr_name in self._type_hints:
            return hint_to_type(self._type_hints[attr_name])
        # マークアップ上のイベントハンドラ属性値は文字列
        if _is_event_handler_attr(attr_name):
            return STRING_TYPE
        return ANY_TYPE


DEFAULT_TYPE_RESOLVER = Html5AttrTypeResolver()


def has_type_for_attr_name(attr_name: str) -> bool:
    return DEFAULT_TYPE_RESOLVER.has_type_for_attr_name(attr_name)


def html5_tag_attr_type(attr_name: str) -> SimpleType:
    return DEFAULT_TYPE_RESOLVER.type_for_attr_name(attr_name)
