"""宣言的 HTML データ文書の正規化.

HTML データ文書（version 1 / 1.1）を HtmlDataCollection（tags / attrs / events）に変換します。

文書形式:
    {
        "version": 1.1,
        "tags": [{"name": "my-el", "description": "...", "attributes": [...],
                  "properties": [...], "events": [...], "slots": [...]}],
        "globalAttributes": [{"name": "...", "valueSet": "v"}],
        "globalEvents": [{"name": "..."}],
        "valueSets": [{"name": "d", "values": [{"name": "ltr"}, {"name": "rtl"}]}]
    }

properties / events / slots / globalEvents は version 1.1 のみ解釈します。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .attr_types import hint_to_type
from .exceptions import HtmlDataParseError
from .models import AttrKind, HtmlAttr, HtmlDataCollection, HtmlEvent, HtmlSlot, HtmlTag
from .types import ANY_TYPE, BOOLEAN_TYPE, SimpleType, lazy, string_literal_union

SUPPORTED_VERSIONS = (1, 1.1)

# valueSet "v" は値を取らない（存在するだけで真になる）属性
_VOID_VALUE_SET = "v"


def description_text(data: Mapping[str, Any]) -> str | None:
    """description（文字列または MarkupContent）をプレーン文字列にする."""
    description = data.get("description")
    if isinstance(description, Mapping):
        # MarkupContent: {"kind": "markdown", "value": "..."}
        description = description.get("value")
    return description or None


def _name(data: Any, what: str) -> str:
    if not isinstance(data, Mapping):
        raise HtmlDataParseError(f"{what} must be an object, got {type(data).__name__}")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise HtmlDataParseError(f"{what} is missing 'name': {dict(data)}")
    return name


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise HtmlDataParseError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _value_sets(data: Mapping[str, Any]) -> dict[str, list[str]]:
    value_sets: dict[str, list[str]] = {}
    for value_set in _list(data, "valueSets"):
        name = _name(value_set, "valueSet")
        value_sets[name] = [_name(v, f"value of valueSet '{name}'") for v in _list(value_set, "values")]
    return value_sets


def _type_hint(data: Mapping[str, Any]) -> SimpleType | None:
    """type（"string" などの名前、または文字列リテラルのリスト）を SimpleType にする.

    Raises:
        HtmlDataParseError: type が文字列でも文字列リストでもない場合
    """
    type_hint = data.get("type")
    if type_hint is None:
        return None
    if isinstance(type_hint, list) and all(isinstance(t, str) for t in type_hint):
        return hint_to_type(tuple(type_hint))
    if not isinstance(type_hint, str):
        raise HtmlDataParseError(f"'type' must be a string or a list of strings, got {type_hint!r}")
    return hint_to_type(type_hint)


def _attr_type(attr_data: Mapping[str, Any], value_sets: dict[str, list[str]]) -> SimpleType:
    type_ = _type_hint(attr_data)
    if type_ is not None:
        return type_

    value_set = attr_data.get("valueSet")
    if value_set is not None and not isinstance(value_set, str):
        raise HtmlDataParseError(f"'valueSet' must be a string, got {type(value_set).__name__}")
    if value_set == _VOID_VALUE_SET:
        return BOOLEAN_TYPE

    values = [_name(v, "attribute value") for v in _list(attr_data, "values")]
    if not values and value_set in value_sets:
        values = value_sets[value_set]
    if values:
        return string_literal_union(values)

    return ANY_TYPE


def _to_attr(
    attr_data: Any,
    value_sets: dict[str, list[str]],
    *,
    kind: AttrKind = "attribute",
    from_tag_name: str | None = None,
) -> HtmlAttr:
    name = _name(attr_data, kind)
    type_ = _attr_type(attr_data, value_sets)
    return HtmlAttr(
        name=name,
        kind=kind,
        get_type=lazy(lambda: type_),
        description=description_text(attr_data),
        from_tag_name=from_tag_name,
    )


def _to_event(event_data: Any, *, from_tag_name: str | None = None) -> HtmlEvent:
    name = _name(event_data, "event")
    type_ = _type_hint(event_data) or ANY_TYPE
    return HtmlEvent(
        name=name,
        get_type=lazy(lambda: type_),
        description=description_text(event_data),
        from_tag_name=from_tag_name,
    )


def _to_tag(tag_data: Any, value_sets: dict[str, list[str]], version: float) -> HtmlTag:
    tag_name = _name(tag_data, "tag")
    attributes = tuple(_to_attr(a, value_sets, from_tag_name=tag_name) for a in _list(tag_data, "attributes"))

    if version < 1.1:
        return HtmlTag(tag_name=tag_name, attributes=attributes, description=description_text(tag_data))

    return HtmlTag(
        tag_name=tag_name,
        attributes=attributes,
        properties=tuple(
            _to_attr(p, value_sets, kind="property", from_tag_name=tag_name) for p in _list(tag_data, "properties")
        ),
        events=tuple(_to_event(e, from_tag_name=tag_name) for e in _list(tag_data, "events")),
        slots=tuple(
            HtmlSlot(name=_name(s, "slot"), description=description_text(s), from_tag_name=tag_name)
            for s in _list(tag_data, "slots")
        ),
        description=description_text(tag_data),
    )


def parse_html_data(data: Any) -> HtmlDataCollection:
    """HTML データ文書を正規化する.

    Args:
        data: HTML データ文書（JSON 由来の dict）

    Returns:
        正規化されたコレクション（built_in は全て False）

    Raises:
        HtmlDataParseError: 文書が dict でない、未対応 version、name 欠落など
    """
    if not isinstance(data, Mapping):
        raise HtmlDataParseError(f"document must be an object, got {type(data).__name__}")

    version = data.get("version")
    if version not in SUPPORTED_VERSIONS:
        raise HtmlDataParseError(f"unsupported version {version!r} (supported: {SUPPORTED_VERSIONS})")

    value_sets = _value_sets(data)
    tags = tuple(_to_tag(t, value_sets, version) for t in _list(data, "tags"))
    attrs = tuple(_to_attr(a, value_sets) for a in _list(data, "globalAttributes"))
    events = tuple(_to_event(e) for e in _list(data, "globalEvents")) if version >= 1.1 else ()

    return HtmlDataCollection(tags=tags, attrs=attrs, events=events)
