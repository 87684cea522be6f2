"""ロギング設定.

標準loggingとstructlogを同じ出力先・同じレベルで設定する。
"""

import logging
import sys

from typing import Any

import structlog


_LOG_FORMAT = "%(message)s"


def configure_logging(level: str | int = "WARNING", json_logs: bool = False) -> None:
    """ロギングを設定する.

    Args:
        level: ログレベル（"DEBUG"などの名前、または数値）
        json_logs: TrueのときJSON形式で出力する
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level, format=_LOG_FORMAT, stream=sys.stderr, force=True
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """structlogのロガーを取得する."""
    return structlog.get_logger(name)
