"""ユーザー設定（customHtmlData / globalHtml*）の読み込み.

設定ファイルは YAML または JSON（yaml.safe_load で両方読める）:

    customHtmlData:
      - ./html-data/my-elements.json
      - version: 1
        tags: [{name: my-inline-el}]
    globalHtmlTags: [my-widget]
    globalHtmlAttributes: [data-testid]
    globalHtmlEvents: [my-event]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from .core.exceptions import ConfigError


def _name_list(mapping: Mapping[str, Any], key: str) -> tuple[str, ...]:
    value = mapping.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings, got {value!r}")
    return tuple(value)


@dataclass(frozen=True)
class HtmlDataConfig:
    """HTML データ関連のユーザー設定.

    Attributes:
        custom_html_data: 1件または順序付きの複数ソース（dict / ファイルパス / 生文字列）
        global_html_tags: 存在を宣言するだけのタグ名
        global_html_attributes: 存在を宣言するだけのグローバル属性名
        global_html_events: 存在を宣言するだけのグローバルイベント名
    """

    custom_html_data: Any = field(default_factory=list)
    global_html_tags: tuple[str, ...] = ()
    global_html_attributes: tuple[str, ...] = ()
    global_html_events: tuple[str, ...] = ()

    @property
    def custom_html_data_sources(self) -> list[Any]:
        """custom_html_data を常にリストとして返す."""
        if self.custom_html_data is None:
            return []
        if isinstance(self.custom_html_data, (list, tuple)):
            return list(self.custom_html_data)
        return [self.custom_html_data]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> HtmlDataConfig:
        """camelCase キーの dict から設定を作る（未知のキーは無視）.

        Raises:
            ConfigError: globalHtml* が文字列リストでない場合
        """
        return cls(
            custom_html_data=mapping.get("customHtmlData", []),
            global_html_tags=_name_list(mapping, "globalHtmlTags"),
            global_html_attributes=_name_list(mapping, "globalHtmlAttributes"),
            global_html_events=_name_list(mapping, "globalHtmlEvents"),
        )


def _resolve_relative_sources(sources: list[Any], base_dir: Path) -> list[Any]:
    resolved: list[Any] = []
    for source in sources:
        if isinstance(source, str) and not Path(source).is_absolute():
            candidate = base_dir / source
            try:
                if candidate.is_file():
                    source = str(candidate)
            except OSError:
                # パスとして解釈できない生文字列はそのまま渡す
                pass
        resolved.append(source)
    return resolved


def load_config(config_path: Path | str) -> HtmlDataConfig:
    """YAML/JSON 設定ファイルを読み込む.

    customHtmlData の相対パスは、設定ファイルのディレクトリ基準で存在すればそちらに解決します。

    Args:
        config_path: 設定ファイルのパス

    Returns:
        設定オブジェクト

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        ConfigError: YAML/JSON として読めない、またはトップレベルが dict でない場合
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file: {config_path}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping, got {type(data).__name__}")

    config = HtmlDataConfig.from_mapping(data)
    sources = _resolve_relative_sources(config.custom_html_data_sources, config_path.parent)
    config = replace(config, custom_html_data=sources)

    logger.info(f"Loaded config from {config_path} ({len(sources)} customHtmlData sources)")
    return config
