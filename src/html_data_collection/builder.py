"""HTML 知識コレクションのビルダー（オーケストレーター）.

- 組み込み: 同梱の HTML5 ベースラインを正規化し、手動パッチと型の補完を行う
- ユーザー: 設定の customHtmlData を順に正規化・マージし、globalHtml* の名前を補う
- 結合: 組み込み → ユーザーの順に連結（またはマージ）して下流の型チェッカーへ渡す

どちらのビルダーも呼び出しごとに新しいコレクションを作り、状態を共有しません。
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from functools import cache
from pathlib import Path
from typing import Any

from loguru import logger

from html_data_collection.adapters import resolve_source
from html_data_collection.config import HtmlDataConfig, load_config
from html_data_collection.core.attr_types import DEFAULT_TYPE_RESOLVER, TypeResolver
from html_data_collection.core.conflicts import collection_summary, detect_conflicts, export_conflict_reports
from html_data_collection.core.exceptions import HtmlDataSourceError
from html_data_collection.core.merge import merge_collections
from html_data_collection.core.models import HtmlAttr, HtmlDataCollection, HtmlEvent, HtmlTag
from html_data_collection.core.parse_html_data import parse_html_data
from html_data_collection.core.patches import BUILTIN_PATCHES, Patch, apply_patches
from html_data_collection.core.types import ANY_TYPE, is_any_type, lazy

HTML5_DATA_PATH = Path(__file__).parent / "data" / "html5.json"

# ソース単位でログ出力してスキップする例外（HtmlDataParseError / JSONDecodeError は ValueError）
_RECOVERABLE_SOURCE_ERRORS = (OSError, ValueError, HtmlDataSourceError)


@cache
def _load_html5_data() -> dict[str, Any]:
    with open(HTML5_DATA_PATH, encoding="utf-8") as f:
        return json.load(f)


def html5_baseline_document() -> dict[str, Any]:
    """組み込みベースラインを1つの HTML データ文書（version 1.1）として返す.

    globalAttributes = グローバル属性 + イベントハンドラ属性（onclick など）+ ARIA 属性
    """
    data = _load_html5_data()
    return {
        "version": data["version"],
        "tags": data["tags"],
        "globalAttributes": [*data["globalAttributes"], *data["events"], *data["ariaAttributes"]],
        "valueSets": data["valueSets"],
    }


def html5_baseline_events() -> list[dict[str, Any]]:
    return list(_load_html5_data()["events"])


# ---------------------------------------------------------------------------
# 組み込みコレクション
# ---------------------------------------------------------------------------


def _needs_resolver_type(attr: HtmlAttr, resolver: TypeResolver) -> bool:
    """型の補完対象か（2つの条件を独立に評価する）."""
    has_special_case = resolver.has_type_for_attr_name(attr.name)
    is_wildcard = is_any_type(attr.get_type())
    return has_special_case or is_wildcard


def add_missing_attr_types(attrs: tuple[HtmlAttr, ...], resolver: TypeResolver) -> tuple[HtmlAttr, ...]:
    """ANY 型、または resolver が特例型を知っている属性の型を resolver で置き換える.

    Args:
        attrs: 対象属性
        resolver: 型解決オラクル

    Returns:
        get_type を差し替えた属性（対象外はそのまま）
    """
    result = []
    for attr in attrs:
        if _needs_resolver_type(attr, resolver):
            name = attr.name
            attr = replace(attr, get_type=lazy(lambda name=name: resolver.type_for_attr_name(name)))
        result.append(attr)
    return tuple(result)


def _mark_built_in(tag: HtmlTag, resolver: TypeResolver) -> HtmlTag:
    return replace(
        tag,
        built_in=True,
        attributes=add_missing_attr_types(tuple(replace(a, built_in=True) for a in tag.attributes), resolver),
        properties=tuple(replace(p, built_in=True) for p in tag.properties),
        events=tuple(replace(e, built_in=True) for e in tag.events),
    )


def get_builtin_html_collection(
    resolver: TypeResolver = DEFAULT_TYPE_RESOLVER,
    patches: tuple[Patch, ...] = BUILTIN_PATCHES,
) -> HtmlDataCollection:
    """組み込み HTML5 ベースラインのコレクションを構築する.

    1. ベースライン文書を正規化
    2. 手動パッチ（svg / slot / value プロパティ / audio・video 属性 / on なしイベント名）
    3. 属性型の補完（resolver）
    4. 全エンティティを built_in=True にする

    Args:
        resolver: 属性型の解決に使うオラクル
        patches: 適用するパッチ（既定は BUILTIN_PATCHES）

    Returns:
        組み込みコレクション
    """
    result = parse_html_data(html5_baseline_document())
    result = apply_patches(result, html5_baseline_events(), patches)

    collection = HtmlDataCollection(
        tags=tuple(_mark_built_in(t, resolver) for t in result.tags),
        attrs=add_missing_attr_types(tuple(replace(a, built_in=True) for a in result.attrs), resolver),
        events=tuple(replace(e, built_in=True) for e in result.events),
    )
    # パッチとベースラインの重複（同名タグ/属性）を畳む
    collection = merge_collections(collection)

    logger.info(
        f"Built built-in collection: tags={len(collection.tags)}, "
        f"attrs={len(collection.attrs)}, events={len(collection.events)}"
    )
    return collection


# ---------------------------------------------------------------------------
# ユーザー設定コレクション
# ---------------------------------------------------------------------------


def _source_label(source: Any) -> str:
    if isinstance(source, dict):
        return "<inline>"
    text = str(source)
    return text if len(text) <= 60 else text[:57] + "..."


def _load_user_source(source: Any) -> HtmlDataCollection:
    adapter = resolve_source(source)
    data = adapter.repair(adapter.read())
    if not adapter.validate(data):
        raise HtmlDataSourceError(adapter.label, "not an HTML data document (expected an object with 'version')")
    return parse_html_data(data)


def _any_type_attr(name: str) -> HtmlAttr:
    return HtmlAttr(name=name, get_type=lazy(lambda: ANY_TYPE))


def _any_type_event(name: str) -> HtmlEvent:
    return HtmlEvent(name=name, get_type=lazy(lambda: ANY_TYPE))


def get_user_config_html_collection(config: HtmlDataConfig) -> HtmlDataCollection:
    """ユーザー設定からコレクションを構築する.

    customHtmlData の各ソースを宣言順に正規化・マージします。1件のソースが壊れていても
    ログ出力してスキップし、全体は中断しません。globalHtmlTags/Attributes/Events の名前は
    ANY 型の最小エンティティとして先頭に置かれます（後段のマージでは明示データが勝つ）。

    Args:
        config: ユーザー設定

    Returns:
        ユーザーコレクション（built_in は全て False）
    """
    collection = HtmlDataCollection.empty()
    skipped = 0
    for source in config.custom_html_data_sources:
        try:
            parsed = _load_user_source(source)
        except _RECOVERABLE_SOURCE_ERRORS as e:
            logger.error(f"Error parsing user configuration 'customHtmlData' ({_source_label(source)}): {e}")
            skipped += 1
            continue
        collection = merge_collections(collection, parsed)

    if skipped:
        logger.warning(f"Skipped {skipped} customHtmlData source(s)")

    synthesized = HtmlDataCollection(
        tags=tuple(HtmlTag(tag_name=name) for name in config.global_html_tags),
        attrs=tuple(_any_type_attr(name) for name in config.global_html_attributes),
        events=tuple(_any_type_event(name) for name in config.global_html_events),
    )

    return combine_collections(synthesized, collection)


# ---------------------------------------------------------------------------
# 結合
# ---------------------------------------------------------------------------


def combine_collections(*collections: HtmlDataCollection) -> HtmlDataCollection:
    """コレクションを単純に連結する（重複はそのまま、後ろほど優先）."""
    return HtmlDataCollection(
        tags=tuple(t for c in collections for t in c.tags),
        attrs=tuple(a for c in collections for a in c.attrs),
        events=tuple(e for c in collections for e in c.events),
    )


def get_html_collection(config: HtmlDataConfig, *, include_builtin: bool = True) -> HtmlDataCollection:
    """組み込み → ユーザーの順にマージした最終コレクションを返す."""
    user = get_user_config_html_collection(config)
    if not include_builtin:
        return merge_collections(user)
    return merge_collections(get_builtin_html_collection(), user)


def main() -> None:
    """CLI エントリポイント."""
    parser = argparse.ArgumentParser(description="Build the HTML knowledge collection")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="User config file (YAML or JSON with customHtmlData / globalHtml* keys)",
    )
    parser.add_argument(
        "--report-dir",
        type=Path,
        default=None,
        help="Report output directory (collection_summary.csv and override reports)",
    )
    parser.add_argument(
        "--no-builtin",
        action="store_true",
        help="Do not include the built-in HTML5 baseline",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    config = load_config(args.config) if args.config else HtmlDataConfig()

    user = get_user_config_html_collection(config)
    builtin = HtmlDataCollection.empty() if args.no_builtin else get_builtin_html_collection()
    collection = merge_collections(builtin, user)

    logger.info(
        f"[COMPLETE] HTML collection: tags={len(collection.tags)}, "
        f"attrs={len(collection.attrs)}, events={len(collection.events)}"
    )

    if args.report_dir:
        args.report_dir.mkdir(parents=True, exist_ok=True)
        summary_path = args.report_dir / "collection_summary.csv"
        collection_summary(collection).write_csv(summary_path)
        logger.info(f"Collection summary: {summary_path}")

        paths = export_conflict_reports(detect_conflicts(builtin, user), args.report_dir)
        for name, path in paths.items():
            if path is not None:
                logger.info(f"Override report ({name}): {path}")


if __name__ == "__main__":
    main()
