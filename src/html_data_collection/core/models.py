"""HTML 知識コレクションのエンティティ.

- HtmlTag: 要素定義（属性/プロパティ/イベント/スロットを保持）
- HtmlAttr: 属性またはプロパティ（kind で区別）
- HtmlEvent: イベント
- HtmlDataCollection: tags / attrs / events の3リストを持つ集約ルート

全て frozen dataclass。ビルド中の変更は dataclasses.replace で新しい値を作り、
返却後のコレクションは変更しない（設定変更時は作り直す）。
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

from .types import SimpleType

TypeGetter = Callable[[], SimpleType]
AttrKind = Literal["attribute", "property"]


@dataclass(frozen=True)
class HtmlAttr:
    """属性（kind="attribute"）またはスクリプト専用プロパティ（kind="property"）.

    Attributes:
        name: 属性名（タグ内/グローバル内で一意）
        get_type: 遅延評価される型記述子
        kind: "attribute" | "property"
        built_in: 組み込み HTML5 ベースライン由来か
        description: 説明文
        from_tag_name: 所属タグ名（グローバルなら None）
    """

    name: str
    get_type: TypeGetter
    kind: AttrKind = "attribute"
    built_in: bool = False
    description: str | None = None
    from_tag_name: str | None = None


@dataclass(frozen=True)
class HtmlEvent:
    name: str
    get_type: TypeGetter
    kind: Literal["event"] = "event"
    built_in: bool = False
    description: str | None = None
    from_tag_name: str | None = None


@dataclass(frozen=True)
class HtmlSlot:
    name: str
    description: str | None = None
    from_tag_name: str | None = None


@dataclass(frozen=True)
class HtmlTag:
    """要素定義.

    Attributes:
        tag_name: 小文字の要素名（コレクション内で一意）
        attributes: タグ固有の属性
        properties: スクリプト専用メンバー（マークアップ属性ではない）
        events: タグ固有のイベント
        slots: 名前付きスロット
        description: 説明文
        built_in: 組み込み HTML5 ベースライン由来か
    """

    tag_name: str
    attributes: tuple[HtmlAttr, ...] = ()
    properties: tuple[HtmlAttr, ...] = ()
    events: tuple[HtmlEvent, ...] = ()
    slots: tuple[HtmlSlot, ...] = ()
    description: str | None = None
    built_in: bool = False

    def get_attribute(self, name: str) -> HtmlAttr | None:
        return next((a for a in self.attributes if a.name == name), None)

    def get_property(self, name: str) -> HtmlAttr | None:
        return next((p for p in self.properties if p.name == name), None)

    def get_event(self, name: str) -> HtmlEvent | None:
        return next((e for e in self.events if e.name == name), None)


@dataclass(frozen=True)
class HtmlDataCollection:
    """tags / attrs（グローバル属性）/ events（グローバルイベント）の集約."""

    tags: tuple[HtmlTag, ...] = field(default_factory=tuple)
    attrs: tuple[HtmlAttr, ...] = field(default_factory=tuple)
    events: tuple[HtmlEvent, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> HtmlDataCollection:
        return cls()

    def get_tag(self, tag_name: str) -> HtmlTag | None:
        # 連結済み（未マージ）コレクションでは後勝ち
        return next((t for t in reversed(self.tags) if t.tag_name == tag_name), None)

    def get_attr(self, name: str) -> HtmlAttr | None:
        return next((a for a in reversed(self.attrs) if a.name == name), None)

    def get_event(self, name: str) -> HtmlEvent | None:
        return next((e for e in reversed(self.events) if e.name == name), None)
