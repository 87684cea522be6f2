"""西暦・和暦変換コマンド."""

from datetime import datetime

import click

from wareki.application.dtos.conversion_dto import (
    ConversionOutputDto,
    ParseJapaneseDateInputDto,
    ToGregorianInputDto,
    ToJapaneseInputDto,
)
from wareki.application.usecases.convert_date_usecase import ConvertDateUseCase
from wareki.interfaces.cli.base import (
    echo_info,
    exit_with_error,
    with_error_handling,
)
from wareki.infrastructure.config.calendar_converter import (
    get_calendar_converter,
)


def _usecase() -> ConvertDateUseCase:
    return ConvertDateUseCase(get_calendar_converter())


def _echo_conversion(
    output: ConversionOutputDto, short: bool = False, with_weekday: bool = False
) -> None:
    if not output.success:
        exit_with_error(output.error_message or "変換に失敗しました")
        return

    text = output.short_text if short else output.full_text
    if with_weekday:
        text = f"{text}（{output.day_of_week}）"
    gregorian = output.gregorian_date.isoformat() if output.gregorian_date else ""
    echo_info(f"{text}\t{gregorian}")


@click.command("to-japanese")
@click.argument("gregorian_date", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option("--short", is_flag=True, help="「R5.12.25」形式で表示")
@click.option("--with-weekday", is_flag=True, help="曜日を付けて表示")
@with_error_handling
def to_japanese(gregorian_date: datetime, short: bool, with_weekday: bool):
    """西暦日付（YYYY-MM-DD）を和暦に変換する."""
    output = _usecase().to_japanese(ToJapaneseInputDto(gregorian_date.date()))
    _echo_conversion(output, short=short, with_weekday=with_weekday)


@click.command("to-gregorian")
@click.argument("era_name")
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
@with_error_handling
def to_gregorian(era_name: str, year: int, month: int, day: int):
    """和暦（元号名 年 月 日）を西暦に変換する."""
    output = _usecase().to_gregorian(ToGregorianInputDto(era_name, year, month, day))
    _echo_conversion(output)


@click.command("parse")
@click.argument("text")
@with_error_handling
def parse(text: str):
    """和暦文字列（例: 令和5年12月25日、R5.12.25）を西暦に変換する."""
    output = _usecase().parse(ParseJapaneseDateInputDto(text))
    _echo_conversion(output)


@click.command("today")
@click.option("--short", is_flag=True, help="「R5.12.25」形式で表示")
@with_error_handling
def today(short: bool):
    """今日の日付を和暦で表示する."""
    _echo_conversion(_usecase().today(), short=short, with_weekday=not short)
