"""日付計算ヘルパー.

年齢・日数差の計算と、日付がどの元号に属するかの判定を提供する。
変換サービスを省略した場合はプロセス全体で共有するサービスを使う。
"""

from datetime import date

from wareki.domain.exceptions import NotConvertibleError, NotFoundError
from wareki.domain.services.calendar_converter_service import (
    CalendarConverterService,
)
from wareki.domain.value_objects.japanese_date import JapaneseDate
from wareki.infrastructure.config.calendar_converter import (
    get_calendar_converter,
)


def _resolve(converter: CalendarConverterService | None) -> CalendarConverterService:
    return converter if converter is not None else get_calendar_converter()


def calculate_age(birth_date: date, base_date: date) -> int:
    """満年齢を計算する.

    Args:
        birth_date: 生年月日
        base_date: 基準日

    Returns:
        基準日時点の満年齢
    """
    age = base_date.year - birth_date.year
    if (base_date.month, base_date.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def calculate_japanese_age(
    birth_date: date,
    base_date: date,
    converter: CalendarConverterService | None = None,
) -> tuple[str | None, int]:
    """基準日の元号名と満年齢を返す（元号がない場合、元号名はNone）."""
    era = _resolve(converter).find_era_by_date(base_date)
    return (era.name if era else None, calculate_age(birth_date, base_date))


def days_between(japanese_date: JapaneseDate, other: JapaneseDate) -> int:
    """2つの和暦日付の日数差（japanese_date - other）."""
    return (japanese_date.to_gregorian() - other.to_gregorian()).days


def days_from(japanese_date: JapaneseDate, reference_date: date) -> int:
    """基準日からの日数差（未来なら正）."""
    return (japanese_date.to_gregorian() - reference_date).days


def is_past(japanese_date: JapaneseDate, reference_date: date) -> bool:
    return days_from(japanese_date, reference_date) < 0


def is_future(japanese_date: JapaneseDate, reference_date: date) -> bool:
    return days_from(japanese_date, reference_date) > 0


def is_today(japanese_date: JapaneseDate, reference_date: date) -> bool:
    return days_from(japanese_date, reference_date) == 0


def is_same_date(japanese_date: JapaneseDate, year: int, month: int, day: int) -> bool:
    """元号年・月・日が一致するかどうか（元号は比較しない）."""
    return (japanese_date.year, japanese_date.month, japanese_date.day) == (
        year,
        month,
        day,
    )


def is_same_month_day(japanese_date: JapaneseDate, month: int, day: int) -> bool:
    return (japanese_date.month, japanese_date.day) == (month, day)


def is_in_era(
    target_date: date,
    era_name: str,
    converter: CalendarConverterService | None = None,
) -> bool:
    """指定日が指定元号の期間内かどうか（未知の元号はFalse）."""
    if not era_name:
        return False
    era = _resolve(converter).find_era_by_name(era_name)
    return era is not None and era.contains(target_date)


def is_meiji(target_date: date, converter: CalendarConverterService | None = None) -> bool:
    return is_in_era(target_date, "Meiji", converter)


def is_taisho(target_date: date, converter: CalendarConverterService | None = None) -> bool:
    return is_in_era(target_date, "Taisho", converter)


def is_showa(target_date: date, converter: CalendarConverterService | None = None) -> bool:
    return is_in_era(target_date, "Showa", converter)


def is_heisei(target_date: date, converter: CalendarConverterService | None = None) -> bool:
    return is_in_era(target_date, "Heisei", converter)


def is_reiwa(target_date: date, converter: CalendarConverterService | None = None) -> bool:
    return is_in_era(target_date, "Reiwa", converter)


def japanese_year_or_none(
    target_date: date,
    era_name: str,
    converter: CalendarConverterService | None = None,
) -> int | None:
    """指定日の年を指定元号の元号年に変換する（変換できない場合はNone）.

    判定は年単位（その年の1月1日）で行う。
    """
    try:
        return _resolve(converter).calculate_japanese_year(target_date.year, era_name)
    except (NotFoundError, NotConvertibleError):
        return None
