"""Era repository interface."""

from abc import ABC, abstractmethod
from datetime import date

from wareki.domain.entities.era_info import EraInfo


class EraRepository(ABC):
    """Repository interface for the era table.

    元号テーブルは開始日の昇順に並び、期間が重複・欠落なく連続する。
    一度構築したテーブルは変更されない。
    """

    @abstractmethod
    def get_all(self) -> list[EraInfo]:
        """全元号を開始日の昇順で取得."""
        pass

    @abstractmethod
    def get_by_id(self, era_id: int) -> EraInfo | None:
        """IDで元号を取得."""
        pass

    @abstractmethod
    def get_by_name(self, name: str) -> EraInfo | None:
        """元号名で元号を取得（完全一致・大文字小文字を区別）.

        Args:
            name: 元号名

        Returns:
            元号情報、見つからない場合はNone

        Raises:
            InvalidArgumentError: 元号名が空の場合
        """
        pass

    @abstractmethod
    def get_by_date(self, target_date: date) -> EraInfo | None:
        """指定日を含む元号を取得.

        Args:
            target_date: 検索対象の西暦日付

        Returns:
            元号情報、最初の元号より前の日付の場合はNone
        """
        pass

    @abstractmethod
    def get_current(self) -> EraInfo | None:
        """現在の元号（終了日のない元号）を取得."""
        pass

    @abstractmethod
    def get_overlapping(self, range_start: date, range_end: date) -> list[EraInfo]:
        """指定期間と重なる元号を時系列順に取得.

        Args:
            range_start: 期間の開始日（含む）
            range_end: 期間の終了日（含む）

        Returns:
            期間と重なる元号情報のリスト

        Raises:
            InvalidArgumentError: 開始日が終了日より後の場合
        """
        pass
