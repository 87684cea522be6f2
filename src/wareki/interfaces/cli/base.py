"""CLI共通ユーティリティ."""

import functools
import logging
import sys

from collections.abc import Callable
from typing import Any, TypeVar

import click

from wareki.domain.exceptions import WarekiError


logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def echo_info(message: str) -> None:
    click.echo(message)


def echo_error(message: str) -> None:
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def exit_with_error(message: str) -> None:
    """エラーメッセージを表示して終了コード1で終了する."""
    echo_error(message)
    sys.exit(1)


def with_error_handling(func: F) -> F:
    """ドメイン例外をエラーメッセージ表示と終了コード1に変換するデコレータ."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except WarekiError as e:
            logger.debug(f"Command {func.__name__} failed: {e}")
            exit_with_error(e.message)

    return wrapper  # type: ignore[return-value]
