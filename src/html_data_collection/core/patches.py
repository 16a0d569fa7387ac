"""組み込み HTML5 ベースラインの手動パッチ.

汎用 HTML データ形式では表現できない要素/プロパティ/属性を、正規化後に補います。
各パッチは (collection, baseline_events) -> collection の独立した関数で、
BUILTIN_PATCHES の順に適用されます。
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any

from .models import HtmlAttr, HtmlDataCollection, HtmlEvent, HtmlTag
from .parse_html_data import description_text
from .types import ANY_TYPE, BOOLEAN_TYPE, STRING_TYPE, SimpleType, lazy, nullable

Patch = Callable[[HtmlDataCollection, Sequence[Any]], HtmlDataCollection]

SLOTCHANGE_DESCRIPTION = (
    "The slotchange event is fired on an HTMLSlotElement instance (<slot> element) "
    "when the node(s) contained in that slot change.\n\n"
    "Note: the slotchange event doesn't fire if the children of a slotted node change "
    "- only if you change (e.g. add or delete) the actual nodes themselves."
)

PLAYSINLINE_DESCRIPTION = (
    "The playsinline attribute is a boolean attribute. If present, it serves as a hint to the "
    'user agent that the video ought to be displayed "inline" in the document by default, '
    "constrained to the element's playback area, instead of being displayed fullscreen or in "
    "an independent resizable window."
)


def _tag_attr(tag_name: str, name: str, type_: SimpleType, description: str | None = None) -> HtmlAttr:
    return HtmlAttr(
        name=name,
        get_type=lazy(lambda: type_),
        built_in=True,
        description=description,
        from_tag_name=tag_name,
    )


def _update_tag(
    collection: HtmlDataCollection,
    tag_name: str,
    update: Callable[[HtmlTag], HtmlTag],
) -> HtmlDataCollection:
    """tag_name のタグが存在すれば update を適用する（無ければそのまま）."""
    if collection.get_tag(tag_name) is None:
        return collection
    return replace(
        collection,
        tags=tuple(update(t) if t.tag_name == tag_name else t for t in collection.tags),
    )


def add_svg_tag(collection: HtmlDataCollection, baseline_events: Sequence[Any]) -> HtmlDataCollection:
    # 構造は持たず、既知タグとして認識されれば十分
    return replace(collection, tags=(*collection.tags, HtmlTag(tag_name="svg", description="")))


def add_slot_tag(collection: HtmlDataCollection, baseline_events: Sequence[Any]) -> HtmlDataCollection:
    """<slot> 要素とグローバル slot 属性を追加する."""
    slot_tag = HtmlTag(
        tag_name="slot",
        events=(
            HtmlEvent(
                name="slotchange",
                get_type=lazy(lambda: ANY_TYPE),
                built_in=True,
                description=SLOTCHANGE_DESCRIPTION,
                from_tag_name="slot",
            ),
        ),
        attributes=(
            _tag_attr("slot", "name", STRING_TYPE),
            _tag_attr("slot", "onslotchange", STRING_TYPE),
        ),
        description="",
    )
    slot_attr = HtmlAttr(name="slot", get_type=lazy(lambda: STRING_TYPE), built_in=True)
    return replace(
        collection,
        tags=(*collection.tags, slot_tag),
        attrs=(*collection.attrs, slot_attr),
    )


def _value_property_patch(tag_name: str) -> Patch:
    def patch(collection: HtmlDataCollection, baseline_events: Sequence[Any]) -> HtmlDataCollection:
        value_prop = HtmlAttr(
            name="value",
            kind="property",
            get_type=lazy(lambda: nullable(STRING_TYPE)),
            built_in=True,
            from_tag_name=tag_name,
        )
        return _update_tag(collection, tag_name, lambda t: replace(t, properties=(*t.properties, value_prop)))

    patch.__name__ = f"add_{tag_name}_value_property"
    return patch


add_textarea_value_property = _value_property_patch("textarea")
add_input_value_property = _value_property_patch("input")


def add_audio_attributes(collection: HtmlDataCollection, baseline_events: Sequence[Any]) -> HtmlDataCollection:
    controlslist = _tag_attr("audio", "controlslist", STRING_TYPE)
    return _update_tag(collection, "audio", lambda t: replace(t, attributes=(*t.attributes, controlslist)))


def add_video_attributes(collection: HtmlDataCollection, baseline_events: Sequence[Any]) -> HtmlDataCollection:
    extra = (
        _tag_attr("video", "controlslist", STRING_TYPE),
        _tag_attr("video", "playsinline", BOOLEAN_TYPE, PLAYSINLINE_DESCRIPTION),
    )
    return _update_tag(collection, "video", lambda t: replace(t, attributes=(*t.attributes, *extra)))


def add_global_events(collection: HtmlDataCollection, baseline_events: Sequence[Any]) -> HtmlDataCollection:
    """ハンドラ属性名（onclick）から "on" を除いたイベント名（click）をグローバルイベントに登録する.

    Args:
        collection: パッチ対象
        baseline_events: ベースラインのイベントハンドラ属性定義（name/description を持つ dict）
    """
    events = []
    for event_data in baseline_events:
        name = event_data["name"]
        events.append(
            HtmlEvent(
                name=name[2:] if name.startswith("on") else name,
                get_type=lazy(lambda: ANY_TYPE),
                built_in=True,
                description=description_text(event_data),
            )
        )
    return replace(collection, events=(*collection.events, *events))


BUILTIN_PATCHES: tuple[Patch, ...] = (
    add_svg_tag,
    add_slot_tag,
    add_textarea_value_property,
    add_input_value_property,
    add_audio_attributes,
    add_video_attributes,
    add_global_events,
)


def apply_patches(
    collection: HtmlDataCollection,
    baseline_events: Sequence[Any],
    patches: Sequence[Patch] = BUILTIN_PATCHES,
) -> HtmlDataCollection:
    for patch in patches:
        collection = patch(collection, baseline_events)
    return collection
