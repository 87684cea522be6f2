"""西暦・和暦変換ドメインサービス."""

import logging

from collections.abc import Callable
from datetime import date, datetime

from wareki.domain.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    NotConvertibleError,
    NotFoundError,
    OutOfRangeError,
)
from wareki.domain.repositories.era_repository import EraRepository
from wareki.domain.value_objects.era import Era
from wareki.domain.value_objects.japanese_date import JapaneseDate


logger = logging.getLogger(__name__)


class CalendarConverterService:
    """西暦と和暦の相互変換を行うドメインサービス.

    元号テーブルはコンストラクタで注入する。状態を持たないため、
    1つのインスタンスを複数の呼び出し元で共有してよい。
    """

    def __init__(
        self,
        era_repository: EraRepository,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """サービスを初期化する.

        Args:
            era_repository: 元号テーブル
            clock: 今日の日付を返す関数（省略時はdate.today）
        """
        if era_repository is None:
            raise InvalidArgumentError("元号リポジトリを指定してください")
        self._era_repository = era_repository
        self._clock = clock or date.today

    @property
    def era_repository(self) -> EraRepository:
        return self._era_repository

    def to_japanese_date(self, gregorian_date: date) -> JapaneseDate:
        """西暦日付を和暦日付に変換する.

        Args:
            gregorian_date: 変換対象の西暦日付（datetimeの場合は日付部分を使う）

        Returns:
            和暦日付

        Raises:
            NotConvertibleError: 対応する元号がない場合
        """
        target = _as_date(gregorian_date)
        era_info = self._era_repository.get_by_date(target)
        if era_info is None:
            raise NotConvertibleError(
                f"指定された日付（{target}）に対応する元号が見つかりません", target
            )

        return era_info.to_japanese_date(target)

    def to_gregorian_date(self, japanese_date: JapaneseDate) -> date:
        """和暦日付を西暦日付に変換する.

        Raises:
            InvalidArgumentError: 和暦日付が未指定の場合
            NotConvertibleError: 和暦日付が西暦日付として成立しない場合
        """
        if japanese_date is None:
            raise InvalidArgumentError("和暦日付を指定してください")

        try:
            return japanese_date.to_gregorian()
        except InvalidStateError as e:
            raise NotConvertibleError(
                "無効な和暦日付のため変換できません", japanese_date
            ) from e

    def find_era_by_date(self, gregorian_date: date) -> Era | None:
        era_info = self._era_repository.get_by_date(_as_date(gregorian_date))
        return era_info.era if era_info else None

    def find_era_by_name(self, era_name: str) -> Era | None:
        if not era_name:
            return None
        era_info = self._era_repository.get_by_name(era_name)
        return era_info.era if era_info else None

    def calculate_gregorian_year(self, era_name: str, era_year: int) -> int:
        """元号年を西暦年に変換する.

        Args:
            era_name: 元号名（例: "Reiwa"）
            era_year: 元号年（例: 3）

        Returns:
            西暦年（例: 2021）

        Raises:
            NotFoundError: 元号が見つからない場合
            OutOfRangeError: 元号年が1未満の場合
        """
        era = self._require_era(era_name)
        if era_year < 1:
            raise OutOfRangeError(
                f"和暦年は1以上である必要があります: {era_name}{era_year}年", era_year
            )
        return era.start.year + era_year - 1

    def calculate_japanese_year(self, gregorian_year: int, era_name: str) -> int:
        """西暦年を指定元号の元号年に変換する.

        その年の1月1日が元号の期間内にあるかで判定する。そのため年の途中で
        始まる元号の初年（例: 2019年の令和）は範囲外として扱われる。

        Raises:
            NotFoundError: 元号が見つからない場合
            NotConvertibleError: 西暦年が元号の範囲外の場合
        """
        era = self._require_era(era_name)

        try:
            new_year = date(gregorian_year, 1, 1)
        except (ValueError, OverflowError) as e:
            raise NotConvertibleError(
                f"西暦{gregorian_year}年は元号「{era_name}」の範囲外です",
                gregorian_year,
            ) from e

        if not era.contains(new_year):
            raise NotConvertibleError(
                f"西暦{gregorian_year}年は元号「{era_name}」の範囲外です",
                gregorian_year,
            )
        return gregorian_year - era.start.year + 1

    def today(self) -> JapaneseDate:
        """今日の和暦日付を返す."""
        return self.to_japanese_date(self._clock())

    def get_eras(self) -> list[Era]:
        return [info.era for info in self._era_repository.get_all()]

    def get_current_era(self) -> Era | None:
        era_info = self._era_repository.get_current()
        return era_info.era if era_info else None

    def get_overlapping_eras(self, range_start: date, range_end: date) -> list[Era]:
        return [
            info.era
            for info in self._era_repository.get_overlapping(
                _as_date(range_start), _as_date(range_end)
            )
        ]

    def _require_era(self, era_name: str) -> Era:
        era = self.find_era_by_name(era_name)
        if era is None:
            logger.debug(f"Unknown era name: {era_name!r}")
            raise NotFoundError(f"元号「{era_name}」が見つかりません", era_name)
        return era


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
