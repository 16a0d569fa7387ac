"""Integration tests for the collection build workflow.

This module tests the complete workflow including:
- Config file loading (YAML) with relative customHtmlData paths
- Built-in and user collection building
- Final merge and override reports (CLI)
"""

import json
import sys
from pathlib import Path

import polars as pl
import pytest

from html_data_collection import builder
from html_data_collection.builder import get_builtin_html_collection, get_user_config_html_collection
from html_data_collection.config import load_config
from html_data_collection.core.merge import merge_collections
from html_data_collection.core.types import ANY_TYPE, NUMBER_TYPE, STRING_TYPE


def _write_project(tmp_path: Path) -> Path:
    data_dir = tmp_path / "html-data"
    data_dir.mkdir()
    (data_dir / "elements.json").write_text(
        json.dumps(
            {
                "version": 1.1,
                "tags": [
                    {
                        "name": "my-element",
                        "attributes": [{"name": "size", "type": "number"}],
                        "events": [{"name": "my-change"}],
                        "slots": [{"name": "header"}],
                    },
                    {"name": "video", "attributes": [{"name": "playsinline", "type": "string"}]},
                ],
                "globalAttributes": [{"name": "title", "type": "string"}],
            }
        ),
        encoding="utf-8",
    )
    config_path = tmp_path / "html-data.yml"
    config_path.write_text(
        "customHtmlData:\n"
        "  - html-data/elements.json\n"
        "  - html-data/missing.json\n"
        "globalHtmlTags: [my-widget]\n"
        "globalHtmlAttributes: [data-testid]\n"
        "globalHtmlEvents: [my-global-event]\n",
        encoding="utf-8",
    )
    return config_path


@pytest.mark.integration
class TestCollectionWorkflow:
    """コレクション構築ワークフロー統合テスト."""

    def test_complete_workflow(self, tmp_path: Path) -> None:
        """設定読み込み → 組み込み/ユーザー構築 → マージの一連."""
        config = load_config(_write_project(tmp_path))

        builtin = get_builtin_html_collection()
        user = get_user_config_html_collection(config)
        collection = merge_collections(builtin, user)

        # ユーザー定義要素
        my_element = collection.get_tag("my-element")
        assert my_element.get_attribute("size").get_type() == NUMBER_TYPE
        assert my_element.get_event("my-change") is not None
        assert [s.name for s in my_element.slots] == ["header"]

        # global 名
        assert collection.get_tag("my-widget") is not None
        assert collection.get_attr("data-testid").get_type() == ANY_TYPE
        assert collection.get_event("my-global-event") is not None

        # 組み込みとの統合: ユーザー側の型が勝ち、built_in は失われる
        video = collection.get_tag("video")
        assert video.built_in is False
        assert video.get_attribute("playsinline").get_type() == STRING_TYPE
        assert video.get_attribute("controlslist").built_in is True
        assert collection.get_attr("title").built_in is False
        assert collection.get_event("click").built_in is True

    def test_rebuild_is_idempotent(self, tmp_path: Path) -> None:
        config = load_config(_write_project(tmp_path))

        first = merge_collections(get_builtin_html_collection(), get_user_config_html_collection(config))
        second = merge_collections(get_builtin_html_collection(), get_user_config_html_collection(config))

        assert [t.tag_name for t in first.tags] == [t.tag_name for t in second.tags]
        assert [(a.name, a.get_type()) for a in first.attrs] == [(a.name, a.get_type()) for a in second.attrs]

    def test_cli_writes_reports(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_path = _write_project(tmp_path)
        report_dir = tmp_path / "reports"
        monkeypatch.setattr(
            sys,
            "argv",
            ["html-data-collection", "--config", str(config_path), "--report-dir", str(report_dir)],
        )

        builder.main()

        summary = pl.read_csv(report_dir / "collection_summary.csv")
        assert "my-element" in summary["tag_name"].to_list()

        type_overrides = pl.read_csv(report_dir / "type_overrides.csv")
        assert type_overrides.filter(pl.col("name") == "playsinline")["type_new"].to_list() == ["string"]

        provenance = pl.read_csv(report_dir / "provenance_changes.csv")
        assert "title" in provenance["name"].to_list()
