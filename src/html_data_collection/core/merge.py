"""タグ/属性/イベントのマージ.

- 識別キー（tag_name / name）による dict 畳み込み（入力順を保持、初出位置に集約）
- スカラー値は後勝ち、リスト値は和集合（同じ規則で再帰的にマージ）
- built_in は全寄与元の論理積（ユーザー由来の名前を後から組み込み扱いにしない）

入力は正規化済み（name/tag_name を必ず持つ）前提で、ここでは検証しません。
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import TypeVar

from .models import HtmlAttr, HtmlDataCollection, HtmlEvent, HtmlSlot, HtmlTag

_Member = TypeVar("_Member", HtmlAttr, HtmlEvent)


def _combine_members(prev: _Member, new: _Member) -> _Member:
    return replace(
        prev,
        get_type=new.get_type,
        description=new.description or prev.description,
        from_tag_name=new.from_tag_name or prev.from_tag_name,
        built_in=prev.built_in and new.built_in,
    )


def _merge_members(members: Iterable[_Member]) -> list[_Member]:
    merged: dict[str, _Member] = {}
    for member in members:
        prev = merged.get(member.name)
        merged[member.name] = member if prev is None else _combine_members(prev, member)
    return list(merged.values())


def merge_html_attrs(attrs: Iterable[HtmlAttr]) -> list[HtmlAttr]:
    """属性（またはプロパティ）を name で一意化してマージする.

    Args:
        attrs: マージ対象（入力順が優先順位、後のものが勝つ）

    Returns:
        name ごとに1件の属性リスト（初出順）

    Examples:
        >>> from html_data_collection.core.types import ANY_TYPE, STRING_TYPE, lazy
        >>> a = HtmlAttr("title", lazy(lambda: ANY_TYPE), built_in=True)
        >>> b = HtmlAttr("title", lazy(lambda: STRING_TYPE), built_in=False)
        >>> [m] = merge_html_attrs([a, b])
        >>> m.get_type() is STRING_TYPE, m.built_in
        (True, False)
    """
    return _merge_members(attrs)


def merge_html_events(events: Iterable[HtmlEvent]) -> list[HtmlEvent]:
    """イベントを name で一意化してマージする."""
    return _merge_members(events)


def merge_html_slots(slots: Iterable[HtmlSlot]) -> list[HtmlSlot]:
    merged: dict[str, HtmlSlot] = {}
    for slot in slots:
        prev = merged.get(slot.name)
        if prev is None:
            merged[slot.name] = slot
        else:
            merged[slot.name] = replace(
                prev,
                description=slot.description or prev.description,
                from_tag_name=slot.from_tag_name or prev.from_tag_name,
            )
    return list(merged.values())


def _combine_tags(prev: HtmlTag, new: HtmlTag) -> HtmlTag:
    return HtmlTag(
        tag_name=prev.tag_name,
        attributes=tuple(merge_html_attrs([*prev.attributes, *new.attributes])),
        properties=tuple(merge_html_attrs([*prev.properties, *new.properties])),
        events=tuple(merge_html_events([*prev.events, *new.events])),
        slots=tuple(merge_html_slots([*prev.slots, *new.slots])),
        description=new.description or prev.description,
        built_in=prev.built_in and new.built_in,
    )


def merge_html_tags(tags: Iterable[HtmlTag]) -> list[HtmlTag]:
    """タグを tag_name で一意化してマージする.

    同名タグが複数ある場合、description は最後の非空値、
    attributes/properties/events/slots は和集合（name で再マージ）になります。

    Args:
        tags: マージ対象（入力順が優先順位）

    Returns:
        tag_name ごとに1件のタグリスト（初出順）
    """
    merged: dict[str, HtmlTag] = {}
    for tag in tags:
        prev = merged.get(tag.tag_name)
        if prev is None:
            # 単独タグでもメンバーの重複は畳んでおく
            merged[tag.tag_name] = _combine_tags(replace(tag, attributes=(), properties=(), events=(), slots=()), tag)
        else:
            merged[tag.tag_name] = _combine_tags(prev, tag)
    return list(merged.values())


def merge_collections(*collections: HtmlDataCollection) -> HtmlDataCollection:
    """複数コレクションを順にマージする（後に渡したものが勝つ）."""
    return HtmlDataCollection(
        tags=tuple(merge_html_tags(t for c in collections for t in c.tags)),
        attrs=tuple(merge_html_attrs(a for c in collections for a in c.attrs)),
        events=tuple(merge_html_events(e for c in collections for e in c.events)),
    )
