"""日付変換・元号検索に関するDTO."""

from dataclasses import dataclass, field
from datetime import date

from wareki.domain.value_objects.era import Era
from wareki.domain.value_objects.japanese_date import JapaneseDate


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class ToJapaneseInputDto:
    """西暦→和暦変換の入力DTO."""

    gregorian_date: date


@dataclass
class ToGregorianInputDto:
    """和暦→西暦変換の入力DTO."""

    era_name: str
    year: int
    month: int
    day: int


@dataclass
class ParseJapaneseDateInputDto:
    """和暦文字列解析の入力DTO."""

    text: str


@dataclass
class ListErasInputDto:
    """元号一覧取得の入力DTO（期間指定時は重なる元号のみ）."""

    range_start: date | None = None
    range_end: date | None = None


@dataclass
class CalculateYearInputDto:
    """年変換の入力DTO.

    direction が "gregorian" のとき元号年→西暦年、"japanese" のとき西暦年→元号年。
    """

    era_name: str
    year: int
    direction: str = "gregorian"


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class ConversionOutputDto:
    """変換結果の出力DTO."""

    japanese_date: JapaneseDate | None = None
    gregorian_date: date | None = None
    full_text: str | None = None
    short_text: str | None = None
    day_of_week: str | None = None
    success: bool = True
    error_message: str | None = None


@dataclass
class EraOutputItem:
    """元号の出力アイテム."""

    name: str
    start: date
    end: date | None
    is_current: bool
    kanji: str
    abbreviation: str

    @classmethod
    def from_era(cls, era: Era, kanji: str, abbreviation: str) -> "EraOutputItem":
        return cls(
            name=era.name,
            start=era.start,
            end=era.end,
            is_current=era.is_current,
            kanji=kanji,
            abbreviation=abbreviation,
        )


@dataclass
class ListErasOutputDto:
    """元号一覧の出力DTO."""

    eras: list[EraOutputItem] = field(default_factory=list)
    success: bool = True
    error_message: str | None = None


@dataclass
class CalculateYearOutputDto:
    """年変換の出力DTO."""

    year: int | None = None
    success: bool = True
    error_message: str | None = None
