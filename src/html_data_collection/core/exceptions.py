"""HTML data collection exceptions.

カスタム例外クラスを定義します。
"""


class HtmlDataParseError(ValueError):
    """HTMLデータ文書を正規化できない場合の例外（ノーマライザによる拒否）.

    Attributes:
        reason: 拒否理由
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid HTML data document: {reason}")


class HtmlDataSourceError(Exception):
    """ユーザー定義データソースが検証に失敗した場合の例外.

    ユーザービルダーはこの例外をソース単位で捕捉し、ログ出力してスキップします。

    Attributes:
        source: 対象ソース（ファイルパスまたはインライン値の要約）
        reason: 失敗理由
    """

    def __init__(self, source: str, reason: str) -> None:
        """例外初期化.

        Args:
            source: 対象ソース
            reason: 失敗理由
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Source skipped: {source} ({reason})")


class ConfigError(ValueError):
    """設定ファイルの形式が不正な場合の例外."""
