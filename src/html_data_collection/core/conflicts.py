"""上書き（衝突）検出とレポート出力.

ベースコレクション（通常は組み込み）に対して、後からマージされるコレクション
（ユーザー設定）が何を上書きするかを Polars DataFrame で報告します。

- type_overrides: 同じキーで解決済みの型が異なる
- provenance_changes: ベース側は built_in、上書き側は非 built_in（マージ後は built_in=False になる）
"""

from __future__ import annotations

from pathlib import Path

import polars as pl

from .models import HtmlAttr, HtmlDataCollection, HtmlEvent

_SUMMARY_SCHEMA = {
    "scope": pl.String,
    "tag_name": pl.String,
    "name": pl.String,
    "kind": pl.String,
    "type": pl.String,
    "built_in": pl.Boolean,
}

_KEY_COLUMNS = ["scope", "tag_name", "name", "kind"]


def _member_row(scope: str, tag_name: str | None, member: HtmlAttr | HtmlEvent) -> dict[str, object]:
    return {
        "scope": scope,
        "tag_name": tag_name or "",
        "name": member.name,
        "kind": member.kind,
        "type": str(member.get_type()),
        "built_in": member.built_in,
    }


def collection_summary(collection: HtmlDataCollection) -> pl.DataFrame:
    """コレクションをエンティティ1件1行の DataFrame にする.

    Args:
        collection: 対象コレクション

    Returns:
        scope / tag_name（グローバルは空文字）/ name / kind / type / built_in 列の DataFrame
        （タグ自体は kind="tag"、type は空文字）
    """
    rows: list[dict[str, object]] = []
    for tag in collection.tags:
        rows.append(
            {
                "scope": "tag",
                "tag_name": tag.tag_name,
                "name": tag.tag_name,
                "kind": "tag",
                "type": "",
                "built_in": tag.built_in,
            }
        )
        for member in (*tag.attributes, *tag.properties, *tag.events):
            rows.append(_member_row("tag", tag.tag_name, member))
    rows.extend(_member_row("global", None, a) for a in collection.attrs)
    rows.extend(_member_row("global", None, e) for e in collection.events)
    return pl.DataFrame(rows, schema=_SUMMARY_SCHEMA)


def detect_conflicts(
    base: HtmlDataCollection,
    override: HtmlDataCollection,
) -> dict[str, pl.DataFrame]:
    """scope + tag_name + name + kind で JOIN して上書きを検出する.

    Args:
        base: 先にマージされるコレクション
        override: 後からマージされる（勝つ）コレクション

    Returns:
        衝突情報の辞書
        - "type_overrides": 型が変わる行（type / type_new）
        - "provenance_changes": built_in が失われる行
    """
    base_df = collection_summary(base).filter(pl.col("kind") != "tag")
    override_df = collection_summary(override).filter(pl.col("kind") != "tag")

    # 同一コレクション内の重複はマージ後の値（後勝ち）で比較する
    base_df = base_df.unique(subset=_KEY_COLUMNS, keep="last", maintain_order=True)
    override_df = override_df.unique(subset=_KEY_COLUMNS, keep="last", maintain_order=True)

    merged = base_df.join(override_df, on=_KEY_COLUMNS, how="inner", suffix="_new")

    type_overrides = merged.filter(pl.col("type") != pl.col("type_new"))
    provenance_changes = merged.filter(pl.col("built_in") & ~pl.col("built_in_new"))

    return {
        "type_overrides": type_overrides,
        "provenance_changes": provenance_changes,
    }


def export_conflict_reports(
    conflicts: dict[str, pl.DataFrame],
    output_dir: Path | str,
) -> dict[str, Path | None]:
    """衝突レポートをCSVファイルとして出力する.

    Args:
        conflicts: detect_conflicts() の戻り値
        output_dir: 出力ディレクトリ

    Returns:
        出力したCSVのパス（衝突が無ければ None）
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    result_paths: dict[str, Path | None] = {}
    for name, df in conflicts.items():
        path = output_dir / f"{name}.csv"
        if len(df) > 0:
            df.write_csv(path)
            result_paths[name] = path
        else:
            result_paths[name] = None

    return result_paths
