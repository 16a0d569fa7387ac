"""html_data_collection: HTML タグ/属性/イベントの知識コレクション構築.

組み込み HTML5 ベースラインとユーザー設定（customHtmlData / globalHtml*）を
1つのコレクションにまとめ、下流の型チェッカーに渡す。
"""

from html_data_collection.builder import (
    combine_collections,
    get_builtin_html_collection,
    get_html_collection,
    get_user_config_html_collection,
)
from html_data_collection.config import HtmlDataConfig, load_config
from html_data_collection.core.models import HtmlAttr, HtmlDataCollection, HtmlEvent, HtmlSlot, HtmlTag

__version__ = "0.1.0"

__all__ = [
    "HtmlDataConfig",
    "load_config",
    "get_builtin_html_collection",
    "get_user_config_html_collection",
    "get_html_collection",
    "combine_collections",
    "HtmlAttr",
    "HtmlEvent",
    "HtmlSlot",
    "HtmlTag",
    "HtmlDataCollection",
]
