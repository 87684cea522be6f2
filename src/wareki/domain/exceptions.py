"""Domain exceptions for wareki.

和暦変換ドメインで発生する例外を定義する。
すべての例外は検出した時点で送出され、呼び出し元へそのまま伝播する。
"""

from typing import Any


class WarekiError(Exception):
    """和暦変換に関する例外の基底クラス."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value


class InvalidArgumentError(WarekiError, ValueError):
    """不正な引数（空の元号名、終了日が開始日より前、範囲指定の逆転など）."""


class OutOfRangeError(WarekiError, ValueError):
    """数値項目（年・月・日）が有効範囲外."""


class NotFoundError(WarekiError, LookupError):
    """元号名による検索で該当する元号がない."""


class NotConvertibleError(WarekiError, ValueError):
    """日付に対応する元号がない、または年が元号の範囲外."""


class InvalidStateError(WarekiError, RuntimeError):
    """値オブジェクトの内部状態が不整合."""
