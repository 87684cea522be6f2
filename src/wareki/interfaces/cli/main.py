"""wareki CLI エントリーポイント."""

import click

from pydantic import ValidationError

from wareki.common.logging import configure_logging
from wareki.infrastructure.config.settings import get_settings
from wareki.interfaces.cli.base import exit_with_error
from wareki.interfaces.cli.commands.convert_commands import (
    parse,
    to_gregorian,
    to_japanese,
    today,
)
from wareki.interfaces.cli.commands.era_commands import eras, year


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="ログレベル（省略時はWAREKI_LOG_LEVEL）",
)
def cli(log_level: str | None):
    """西暦と和暦の相互変換ツール."""
    try:
        settings = get_settings()
    except ValidationError as e:
        fields = ", ".join(
            ".".join(map(str, error["loc"])) for error in e.errors()
        )
        exit_with_error(f"設定が不正です（WAREKI_*環境変数を確認してください）: {fields}")
        return
    configure_logging(log_level or settings.log_level, json_logs=settings.log_json)


cli.add_command(to_japanese)
cli.add_command(to_gregorian)
cli.add_command(parse)
cli.add_command(today)
cli.add_command(eras)
cli.add_command(year)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
