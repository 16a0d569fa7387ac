"""HTML 知識コレクションのコア処理群.

- 型記述子と遅延評価（types）
- エンティティ（models）
- 正規化（HTML データ文書 → コレクション）
- マージ（識別キーによる和集合/後勝ち）
- 属性型の解決とベースラインパッチ
"""

from .attr_types import Html5AttrTypeResolver, TypeResolver, has_type_for_attr_name, html5_tag_attr_type
from .merge import merge_collections, merge_html_attrs, merge_html_events, merge_html_tags
from .models import HtmlAttr, HtmlDataCollection, HtmlEvent, HtmlSlot, HtmlTag
from .parse_html_data import parse_html_data
from .types import SimpleType, SimpleTypeKind, lazy

__all__ = [
    "SimpleType",
    "SimpleTypeKind",
    "lazy",
    "HtmlAttr",
    "HtmlEvent",
    "HtmlSlot",
    "HtmlTag",
    "HtmlDataCollection",
    "parse_html_data",
    "merge_html_attrs",
    "merge_html_events",
    "merge_html_tags",
    "merge_collections",
    "TypeResolver",
    "Html5AttrTypeResolver",
    "has_type_for_attr_name",
    "html5_tag_attr_type",
]
