"""Unit tests for merge functionality."""

from html_data_collection.core.merge import (
    merge_collections,
    merge_html_attrs,
    merge_html_events,
    merge_html_tags,
)
from html_data_collection.core.models import HtmlAttr, HtmlDataCollection, HtmlEvent, HtmlSlot, HtmlTag
from html_data_collection.core.types import ANY_TYPE, BOOLEAN_TYPE, STRING_TYPE, lazy


def _attr(name: str, type_=ANY_TYPE, **kwargs) -> HtmlAttr:
    return HtmlAttr(name=name, get_type=lazy(lambda: type_), **kwargs)


def _event(name: str, **kwargs) -> HtmlEvent:
    return HtmlEvent(name=name, get_type=lazy(lambda: ANY_TYPE), **kwargs)


class TestMergeHtmlAttrs:
    """merge_html_attrs関数のテスト."""

    def test_unique_by_name(self) -> None:
        """同名属性が1件にまとまること."""
        result = merge_html_attrs([_attr("title"), _attr("id"), _attr("title")])

        assert [a.name for a in result] == ["title", "id"]

    def test_later_type_wins(self) -> None:
        """後から来た属性の型が優先されること."""
        result = merge_html_attrs([_attr("open", ANY_TYPE), _attr("open", BOOLEAN_TYPE)])

        assert len(result) == 1
        assert result[0].get_type() == BOOLEAN_TYPE

    def test_built_in_is_logical_and(self) -> None:
        """built_in=True と False をマージすると False になること."""
        built_in = _attr("title", built_in=True)
        user = _attr("title", built_in=False)

        assert merge_html_attrs([built_in, user])[0].built_in is False
        assert merge_html_attrs([user, built_in])[0].built_in is False
        assert merge_html_attrs([built_in, built_in])[0].built_in is True

    def test_description_last_non_empty(self) -> None:
        """description は最後の非空値が残ること."""
        result = merge_html_attrs(
            [
                _attr("title", description="first"),
                _attr("title", description="second"),
                _attr("title", description=None),
            ]
        )

        assert result[0].description == "second"

    def test_from_tag_name_override(self) -> None:
        result = merge_html_attrs([_attr("name"), _attr("name", from_tag_name="slot")])

        assert result[0].from_tag_name == "slot"

    def test_empty_input(self) -> None:
        assert merge_html_attrs([]) == []


class TestMergeHtmlEvents:
    """merge_html_events関数のテスト."""

    def test_unique_by_name(self) -> None:
        result = merge_html_events([_event("click", built_in=True), _event("click"), _event("input")])

        assert [e.name for e in result] == ["click", "input"]
        assert result[0].built_in is False


class TestMergeHtmlTags:
    """merge_html_tags関数のテスト."""

    def test_shared_tag_name_unions_members(self) -> None:
        """同名タグの属性/イベントが和集合になり、name の重複が無いこと."""
        first = [HtmlTag("my-el", attributes=(_attr("a"), _attr("b")), events=(_event("change"),))]
        second = [HtmlTag("my-el", attributes=(_attr("b"), _attr("c")), events=(_event("change"), _event("open")))]

        result = merge_html_tags([*first, *second])

        assert len(result) == 1
        tag = result[0]
        assert [a.name for a in tag.attributes] == ["a", "b", "c"]
        assert [e.name for e in tag.events] == ["change", "open"]

    def test_properties_and_slots_are_merged(self) -> None:
        first = HtmlTag(
            "my-el",
            properties=(_attr("value", kind="property"),),
            slots=(HtmlSlot("header"),),
        )
        second = HtmlTag(
            "my-el",
            properties=(_attr("value", STRING_TYPE, kind="property"),),
            slots=(HtmlSlot("header", description="Header slot"), HtmlSlot("footer")),
        )

        [tag] = merge_html_tags([first, second])

        assert len(tag.properties) == 1
        assert tag.properties[0].get_type() == STRING_TYPE
        assert [s.name for s in tag.slots] == ["header", "footer"]
        assert tag.slots[0].description == "Header slot"

    def test_description_last_non_empty(self) -> None:
        tags = [HtmlTag("x", description="old"), HtmlTag("x", description="new"), HtmlTag("x", description="")]

        assert merge_html_tags(tags)[0].description == "new"

    def test_built_in_is_logical_and(self) -> None:
        tags = [HtmlTag("div", built_in=True), HtmlTag("div", built_in=False)]

        assert merge_html_tags(tags)[0].built_in is False

    def test_order_is_first_seen(self) -> None:
        tags = [HtmlTag("b"), HtmlTag("a"), HtmlTag("b"), HtmlTag("c")]

        assert [t.tag_name for t in merge_html_tags(tags)] == ["b", "a", "c"]

    def test_duplicates_within_single_tag_are_folded(self) -> None:
        tag = HtmlTag("x", attributes=(_attr("a"), _attr("a", STRING_TYPE)))

        [merged] = merge_html_tags([tag])

        assert len(merged.attributes) == 1
        assert merged.attributes[0].get_type() == STRING_TYPE


class TestMergeCollections:
    """merge_collections関数のテスト."""

    def test_later_collection_wins(self) -> None:
        base = HtmlDataCollection(attrs=(_attr("title", ANY_TYPE, built_in=True),), events=(_event("click"),))
        override = HtmlDataCollection(attrs=(_attr("title", STRING_TYPE),), tags=(HtmlTag("my-el"),))

        result = merge_collections(base, override)

        assert result.get_attr("title").get_type() == STRING_TYPE
        assert result.get_attr("title").built_in is False
        assert [t.tag_name for t in result.tags] == ["my-el"]
        assert [e.name for e in result.events] == ["click"]

    def test_no_input(self) -> None:
        assert merge_collections() == HtmlDataCollection.empty()
