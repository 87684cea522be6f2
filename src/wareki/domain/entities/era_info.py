"""元号情報エンティティ."""

from datetime import date

from wareki.domain.entities.base import BaseEntity
from wareki.domain.exceptions import InvalidArgumentError, NotConvertibleError
from wareki.domain.value_objects.era import Era
from wareki.domain.value_objects.japanese_date import JapaneseDate


class EraInfo(BaseEntity):
    """元号テーブルの1行を表すエンティティ.

    元号の値オブジェクトに、テーブル内での識別子と時系列順序を付与する。
    順序は新しい元号ほど大きい値になる。
    """

    def __init__(self, id: int, era: Era, order: int) -> None:
        """元号情報エンティティを初期化する.

        Args:
            id: 元号ID（1以上）
            era: 元号
            order: 時系列順序（0以上、新しいほど大きい）

        Raises:
            InvalidArgumentError: 元号が未指定、またはID・順序が範囲外の場合
        """
        if id is None or id < 1:
            raise InvalidArgumentError(f"IDは1以上である必要があります: {id}", id)
        if era is None:
            raise InvalidArgumentError("元号を指定してください")
        if order < 0:
            raise InvalidArgumentError(
                f"順序は0以上である必要があります: {order}", order
            )

        super().__init__(id)
        self.era = era
        self.order = order

    @property
    def name(self) -> str:
        return self.era.name

    def contains(self, target_date: date) -> bool:
        """指定日がこの元号の期間内かどうかを返す."""
        return self.era.contains(target_date)

    def duration_in_years(self, as_of: date | None = None) -> int:
        """元号の継続年数を返す（継続中の元号は基準日までの年数）."""
        return self.era.duration_in_years(as_of)

    def to_japanese_date(self, target_date: date) -> JapaneseDate:
        """西暦日付をこの元号の和暦日付に変換する.

        Raises:
            NotConvertibleError: 指定日がこの元号の期間外の場合
        """
        if not self.contains(target_date):
            raise NotConvertibleError(
                f"指定された日付（{target_date}）は{self.era.name}の期間外です",
                target_date,
            )

        era_year = target_date.year - self.era.start.year + 1
        return JapaneseDate(self.era, era_year, target_date.month, target_date.day)

    def is_newer_than(self, other: "EraInfo") -> bool:
        if other is None:
            raise InvalidArgumentError("比較対象の元号情報を指定してください")
        return self.order > other.order

    def is_older_than(self, other: "EraInfo") -> bool:
        if other is None:
            raise InvalidArgumentError("比較対象の元号情報を指定してください")
        return self.order < other.order

    def __repr__(self) -> str:
        return f"EraInfo(id={self.id}, era={self.era!r}, order={self.order})"

    def __str__(self) -> str:
        return f"[{self.id}] {self.era} (order: {self.order})"
