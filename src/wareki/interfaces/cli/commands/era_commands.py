"""元号検索・年変換コマンド."""

from datetime import datetime

import click

from wareki.application.dtos.conversion_dto import (
    CalculateYearInputDto,
    CalculateYearOutputDto,
    ListErasInputDto,
)
from wareki.application.usecases.lookup_eras_usecase import LookupErasUseCase
from wareki.interfaces.cli.base import (
    echo_info,
    exit_with_error,
    with_error_handling,
)
from wareki.infrastructure.config.calendar_converter import (
    get_calendar_converter,
)


_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _usecase() -> LookupErasUseCase:
    return LookupErasUseCase(get_calendar_converter())


@click.command("eras")
@click.option("--from", "range_start", type=_DATE, help="期間の開始日（YYYY-MM-DD）")
@click.option("--to", "range_end", type=_DATE, help="期間の終了日（YYYY-MM-DD）")
@with_error_handling
def eras(range_start: datetime | None, range_end: datetime | None):
    """元号の一覧を表示する（期間指定時はその期間と重なる元号のみ）."""
    output = _usecase().list_eras(
        ListErasInputDto(
            range_start=range_start.date() if range_start else None,
            range_end=range_end.date() if range_end else None,
        )
    )
    if not output.success:
        exit_with_error(output.error_message or "元号の取得に失敗しました")
        return

    for item in output.eras:
        end = item.end.isoformat() if item.end else "現在"
        echo_info(
            f"{item.abbreviation} {item.kanji}（{item.name}）\t"
            f"{item.start.isoformat()} - {end}"
        )


@click.group()
def year():
    """元号年と西暦年の変換."""
    pass


def _echo_year(output: CalculateYearOutputDto) -> None:
    if not output.success:
        exit_with_error(output.error_message or "年の変換に失敗しました")
        return
    echo_info(str(output.year))


@year.command("gregorian")
@click.argument("era_name")
@click.argument("era_year", type=int)
@with_error_handling
def gregorian_year(era_name: str, era_year: int):
    """元号年を西暦年に変換する（例: Reiwa 3 → 2021）."""
    _echo_year(
        _usecase().calculate_year(
            CalculateYearInputDto(era_name=era_name, year=era_year)
        )
    )


@year.command("japanese")
@click.argument("gregorian_year_value", metavar="GREGORIAN_YEAR", type=int)
@click.argument("era_name")
@with_error_handling
def japanese_year(gregorian_year_value: int, era_name: str):
    """西暦年を元号年に変換する（例: 2021 Reiwa → 3）."""
    _echo_year(
        _usecase().calculate_year(
            CalculateYearInputDto(
                era_name=era_name, year=gregorian_year_value, direction="japanese"
            )
        )
    )
