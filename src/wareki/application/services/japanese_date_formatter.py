"""和暦日付の文字列変換.

和暦日付を「令和5年12月25日」「R5.12.25」などの文字列に整形し、
逆に和暦文字列を和暦日付に変換する。
"""

import re

from dataclasses import dataclass

from wareki.domain.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
)
from wareki.domain.services.calendar_converter_service import (
    CalendarConverterService,
)
from wareki.domain.value_objects.era import Era
from wareki.domain.value_objects.japanese_date import JapaneseDate


@dataclass(frozen=True)
class EraLabel:
    """元号の表示名."""

    kanji: str
    abbreviation: str


ERA_LABELS: dict[str, EraLabel] = {
    "Meiji": EraLabel(kanji="明治", abbreviation="M"),
    "Taisho": EraLabel(kanji="大正", abbreviation="T"),
    "Showa": EraLabel(kanji="昭和", abbreviation="S"),
    "Heisei": EraLabel(kanji="平成", abbreviation="H"),
    "Reiwa": EraLabel(kanji="令和", abbreviation="R"),
}

WEEKDAY_LABELS = ("月", "火", "水", "木", "金", "土", "日")

_ZEN_TO_HAN = str.maketrans("０１２３４５６７８９．", "0123456789.")

# 「令和5年3月15日」「令和元年」「令和5年3月」
_KANJI_PATTERN = re.compile(
    r"(?P<era>\S+?)\s*(?P<year>元|\d+)年"
    r"(?:\s*(?P<month>\d+)月(?:\s*(?P<day>\d+)日)?)?"
)
# 「R5.3.15」「Reiwa 5.3.15」
_DOTTED_PATTERN = re.compile(
    r"(?P<era>[A-Za-z]+)\s*(?P<year>\d+)\.(?P<month>\d+)\.(?P<day>\d+)"
)


def label_for(era: Era) -> EraLabel:
    """元号の表示名を返す（未登録の元号は元号名とその先頭文字）."""
    return ERA_LABELS.get(era.name) or EraLabel(
        kanji=era.name, abbreviation=era.name[0]
    )


class JapaneseDateFormatter:
    """和暦日付の整形と解析を行うサービス."""

    def __init__(self, converter: CalendarConverterService) -> None:
        self._converter = converter

    def format_full(self, japanese_date: JapaneseDate) -> str:
        """「令和5年12月25日」形式（1年は「元年」）."""
        year = "元" if japanese_date.is_first_year else str(japanese_date.year)
        kanji = label_for(japanese_date.era).kanji
        return f"{kanji}{year}年{japanese_date.month}月{japanese_date.day}日"

    def format_short(self, japanese_date: JapaneseDate) -> str:
        """「R5.12.25」形式."""
        abbreviation = label_for(japanese_date.era).abbreviation
        return (
            f"{abbreviation}{japanese_date.year}"
            f".{japanese_date.month}.{japanese_date.day}"
        )

    def day_of_week(self, japanese_date: JapaneseDate) -> str:
        """曜日（「月」〜「日」）."""
        return WEEKDAY_LABELS[japanese_date.to_gregorian().weekday()]

    def format_with_day_of_week(self, japanese_date: JapaneseDate) -> str:
        """「令和5年12月25日（月）」形式."""
        return f"{self.format_full(japanese_date)}（{self.day_of_week(japanese_date)}）"

    def format_gregorian(self, japanese_date: JapaneseDate) -> str:
        """「2023年12月25日」形式."""
        d = japanese_date.to_gregorian()
        return f"{d.year}年{d.month}月{d.day}日"

    def format_iso(self, japanese_date: JapaneseDate) -> str:
        """「2023-12-25」形式."""
        return japanese_date.to_gregorian().isoformat()

    def format_detailed(self, japanese_date: JapaneseDate) -> str:
        """「令和5年12月25日 (2023年12月25日)」形式."""
        return (
            f"{self.format_full(japanese_date)} "
            f"({self.format_gregorian(japanese_date)})"
        )

    def parse(self, text: str) -> JapaneseDate:
        """和暦文字列を和暦日付に変換する.

        対応フォーマット:
        - 「令和5年3月15日」→ 令和5年3月15日
        - 「令和5年3月」→ 令和5年3月1日
        - 「令和元年」→ 令和1年1月1日
        - 「R5.3.15」「Reiwa 5.3.15」
        全角数字も受け付ける。

        Raises:
            InvalidArgumentError: パースできない文字列の場合
            NotFoundError: 元号が見つからない場合
            OutOfRangeError: 年・月・日が範囲外の場合
        """
        if not text or not text.strip():
            raise InvalidArgumentError("和暦文字列を指定してください", text)

        normalized = text.strip().translate(_ZEN_TO_HAN)
        match = _DOTTED_PATTERN.fullmatch(normalized) or _KANJI_PATTERN.fullmatch(
            normalized
        )
        if match is None:
            raise InvalidArgumentError(
                f"和暦文字列をパースできません: '{text}'", text
            )

        era = self._resolve_era(match.group("era"))
        year_str = match.group("year")
        year = 1 if year_str == "元" else int(year_str)
        month = int(match.group("month")) if match.group("month") else 1
        day = int(match.group("day")) if match.group("day") else 1

        try:
            return JapaneseDate(era, year, month, day)
        except OutOfRangeError as e:
            raise OutOfRangeError(f"不正な日付です: {text}（{e.message}）", text) from e

    def _resolve_era(self, token: str) -> Era:
        era = self._converter.find_era_by_name(token)
        if era is not None:
            return era

        for name, label in ERA_LABELS.items():
            if token in (label.kanji, label.abbreviation, label.abbreviation.lower()):
                era = self._converter.find_era_by_name(name)
                if era is not None:
                    return era

        raise NotFoundError(f"元号「{token}」が見つかりません", token)
