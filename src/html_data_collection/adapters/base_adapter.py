"""HTMLデータソース用アダプタ（基底クラス）.

ユーザー設定 customHtmlData の各ソース（インライン値 / JSONファイル）を
共通インターフェースで扱うための抽象基底クラスを定義します。
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseAdapter(ABC):
    """HTMLデータソースアダプタの基底クラス.

    全てのアダプタはこのクラスを継承し、read()/validate()/repair() を実装します。

    Attributes:
        label: ログ/エラーメッセージ用のソース表記
    """

    label: str = "<inline>"

    @abstractmethod
    def read(self) -> Any:
        """データソースを読み込み、HTMLデータ文書（通常は dict）を返す.

        Raises:
            ValueError: データ形式が不正な場合
        """
        ...

    def validate(self, data: Any) -> bool:
        """HTMLデータ文書として最低限の形をしているか検証する."""
        return isinstance(data, dict) and "version" in data

    def repair(self, data: Any) -> Any:
        """よくある形の揺れを修復する（必要なら）."""
        return data
