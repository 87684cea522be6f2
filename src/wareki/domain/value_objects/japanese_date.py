"""和暦日付の値オブジェクト."""

import calendar

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from functools import total_ordering

from wareki.domain.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    OutOfRangeError,
)
from wareki.domain.value_objects.era import Era


MIN_ERA_YEAR = 1
MAX_ERA_YEAR = 200


@total_ordering
@dataclass(frozen=True)
class JapaneseDate:
    """和暦の日付（元号 + 元号年 + 月 + 日）.

    生成時には暦として成立するか（うるう年を考慮した月の日数）のみを検証する。
    合成した西暦日付が元号自身の期間内にあるかは検証しない。
    例えば令和1年1月1日は生成できるが、令和の開始日（2019/5/1）より前の日付を表す。
    元号の期間に対して正しい和暦日付はCalendarConverterServiceの変換結果を使うこと。
    """

    era: Era
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.era is None:
            raise InvalidArgumentError("元号を指定してください")
        if not isinstance(self.era, Era):
            raise InvalidArgumentError(f"不正な元号です: {self.era!r}", self.era)

        if not MIN_ERA_YEAR <= self.year <= MAX_ERA_YEAR:
            raise OutOfRangeError(
                f"年は{MIN_ERA_YEAR}以上{MAX_ERA_YEAR}以下である必要があります: {self.year}",
                self.year,
            )
        if not 1 <= self.month <= 12:
            raise OutOfRangeError(
                f"月は1以上12以下である必要があります: {self.month}", self.month
            )
        self._validate_day()

    def _validate_day(self) -> None:
        if not 1 <= self.day <= 31:
            raise OutOfRangeError(
                f"日は1以上31以下である必要があります: {self.day}", self.day
            )

        # 西暦年がdatetimeの扱える範囲外の場合は1〜31の検証のみとする
        if not MINYEAR <= self.gregorian_year <= MAXYEAR:
            return

        _, days_in_month = calendar.monthrange(self.gregorian_year, self.month)
        if self.day > days_in_month:
            raise OutOfRangeError(
                f"{self.era.name}{self.year}年{self.month}月は{days_in_month}日までです",
                self.day,
            )

    @property
    def gregorian_year(self) -> int:
        """対応する西暦年."""
        return self.era.start.year + self.year - 1

    @property
    def is_first_year(self) -> bool:
        """元年かどうか."""
        return self.year == 1

    @property
    def gregorian_date(self) -> date:
        return self.to_gregorian()

    def to_gregorian(self) -> date:
        """対応する西暦日付を返す.

        Raises:
            InvalidStateError: 西暦日付として成立しない場合
        """
        try:
            return date(self.gregorian_year, self.month, self.day)
        except (ValueError, OverflowError) as e:
            raise InvalidStateError(f"無効な和暦日付です: {self}", self) from e

    def _sort_key(self) -> tuple[int, int, int, date, str, bool, date]:
        # 同じ日付でも元号が異なれば等しくないため、元号の全項目で順序を決める
        return (
            self.gregorian_year,
            self.month,
            self.day,
            self.era.start,
            self.era.name,
            self.era.end is None,
            self.era.end or date.min,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, JapaneseDate):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"{self.era.name} {self.year}.{self.month}.{self.day}"
