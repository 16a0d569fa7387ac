"""Unit tests for built-in baseline patches."""

from html_data_collection.core.models import HtmlDataCollection, HtmlTag
from html_data_collection.core.patches import (
    BUILTIN_PATCHES,
    add_audio_attributes,
    add_global_events,
    add_input_value_property,
    add_slot_tag,
    add_svg_tag,
    add_textarea_value_property,
    add_video_attributes,
    apply_patches,
)
from html_data_collection.core.types import BOOLEAN_TYPE, STRING_TYPE, nullable

_MEDIA = HtmlDataCollection(tags=(HtmlTag("audio"), HtmlTag("video"), HtmlTag("input"), HtmlTag("textarea")))


class TestPatches:
    """各パッチ関数のテスト."""

    def test_add_svg_tag(self) -> None:
        result = add_svg_tag(HtmlDataCollection.empty(), [])

        svg = result.get_tag("svg")
        assert svg is not None
        assert (svg.attributes, svg.properties, svg.events, svg.slots) == ((), (), (), ())

    def test_add_slot_tag(self) -> None:
        result = add_slot_tag(HtmlDataCollection.empty(), [])

        slot = result.get_tag("slot")
        assert [e.name for e in slot.events] == ["slotchange"]
        assert [a.name for a in slot.attributes] == ["name", "onslotchange"]
        assert all(a.from_tag_name == "slot" and a.built_in for a in slot.attributes)
        assert slot.events[0].from_tag_name == "slot"
        assert slot.get_attribute("name").get_type() == STRING_TYPE

        global_slot = result.get_attr("slot")
        assert global_slot.get_type() == STRING_TYPE
        assert global_slot.from_tag_name is None

    def test_value_properties(self) -> None:
        result = add_input_value_property(add_textarea_value_property(_MEDIA, []), [])

        for tag_name in ("input", "textarea"):
            value = result.get_tag(tag_name).get_property("value")
            assert value.kind == "property"
            assert value.from_tag_name == tag_name
            assert value.get_type() == nullable(STRING_TYPE)

    def test_value_property_skipped_when_tag_missing(self) -> None:
        collection = HtmlDataCollection(tags=(HtmlTag("div"),))

        assert add_textarea_value_property(collection, []) is collection

    def test_media_attributes(self) -> None:
        result = add_video_attributes(add_audio_attributes(_MEDIA, []), [])

        audio = result.get_tag("audio")
        assert [a.name for a in audio.attributes] == ["controlslist"]

        video = result.get_tag("video")
        assert video.get_attribute("controlslist").get_type() == STRING_TYPE
        assert video.get_attribute("playsinline").get_type() == BOOLEAN_TYPE
        assert video.get_attribute("playsinline").description

    def test_add_global_events_strips_on(self) -> None:
        events = [{"name": "onclick", "description": "Clicked"}, {"name": "toggle"}]

        result = add_global_events(HtmlDataCollection.empty(), events)

        assert [e.name for e in result.events] == ["click", "toggle"]
        assert result.get_event("click").description == "Clicked"
        assert all(e.built_in for e in result.events)

    def test_add_global_events_flattens_markup_description(self) -> None:
        events = [{"name": "onclick", "description": {"kind": "markdown", "value": "Clicked"}}]

        result = add_global_events(HtmlDataCollection.empty(), events)

        assert result.get_event("click").description == "Clicked"

    def test_apply_patches_order(self) -> None:
        result = apply_patches(_MEDIA, [{"name": "oninput"}])

        assert [t.tag_name for t in result.tags][-2:] == ["svg", "slot"]
        assert result.get_event("input") is not None
        assert len(BUILTIN_PATCHES) == 7

    def test_apply_no_patches(self) -> None:
        assert apply_patches(_MEDIA, [], patches=()) is _MEDIA
