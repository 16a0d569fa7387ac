"""型記述子（SimpleType）と遅延評価セル.

下流の型チェッカーが属性値/イベントを検査するための最小限の型表現です。
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import cache
from typing import TypeVar

T = TypeVar("T")


class SimpleTypeKind(Enum):
    """型記述子の種別."""

    ANY = "ANY"
    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    STRING_LITERAL = "STRING_LITERAL"
    UNION = "UNION"


@dataclass(frozen=True)
class SimpleType:
    """型記述子.

    Attributes:
        kind: 種別
        types: UNION の構成型
        value: STRING_LITERAL の値
    """

    kind: SimpleTypeKind
    types: tuple[SimpleType, ...] = ()
    value: str | None = None

    def __str__(self) -> str:
        if self.kind is SimpleTypeKind.UNION:
            return " | ".join(str(t) for t in self.types)
        if self.kind is SimpleTypeKind.STRING_LITERAL:
            return f'"{self.value}"'
        return self.kind.value.lower()


ANY_TYPE = SimpleType(SimpleTypeKind.ANY)
STRING_TYPE = SimpleType(SimpleTypeKind.STRING)
NUMBER_TYPE = SimpleType(SimpleTypeKind.NUMBER)
BOOLEAN_TYPE = SimpleType(SimpleTypeKind.BOOLEAN)
NULL_TYPE = SimpleType(SimpleTypeKind.NULL)


def string_literal_union(values: list[str] | tuple[str, ...]) -> SimpleType:
    """文字列リテラルの union を作る（1件ならリテラルそのもの）."""
    literals = tuple(SimpleType(SimpleTypeKind.STRING_LITERAL, value=v) for v in values)
    if len(literals) == 1:
        return literals[0]
    return SimpleType(SimpleTypeKind.UNION, types=literals)


def nullable(type_: SimpleType) -> SimpleType:
    return SimpleType(SimpleTypeKind.UNION, types=(type_, NULL_TYPE))


def lazy(factory: Callable[[], T]) -> Callable[[], T]:
    """初回呼び出し時に評価し、以降はキャッシュ済みの同一インスタンスを返す.

    型解決は重い/仕様データ読み込みと相互依存しうるため、必要になるまで遅延させます。

    Examples:
        >>> get_type = lazy(lambda: SimpleType(SimpleTypeKind.STRING))
        >>> get_type() is get_type()
        True
    """
    return cache(factory)


def is_any_type(type_: SimpleType) -> bool:
    return type_.kind is SimpleTypeKind.ANY
