"""カレンダー変換サービスファクトリー

設定に基づいて元号テーブルを構築し、CalendarConverterServiceを提供します。
プロセス全体で共有するインスタンスは初回アクセス時に一度だけ生成します。
"""

import logging
import threading

from wareki.domain.services.calendar_converter_service import (
    CalendarConverterService,
)
from wareki.infrastructure.config.era_seed import load_era_seed
from wareki.infrastructure.config.settings import Settings, get_settings
from wareki.infrastructure.persistence.in_memory_era_repository import (
    InMemoryEraRepository,
)


logger = logging.getLogger(__name__)

_lock = threading.Lock()
_shared_converter: CalendarConverterService | None = None


class CalendarConverterFactory:
    """カレンダー変換サービスファクトリー"""

    @staticmethod
    def create(settings: Settings | None = None) -> CalendarConverterService:
        """設定に基づいて新しい変換サービスを作成

        Args:
            settings: 設定（省略時はget_settings()）

        Returns:
            CalendarConverterService: 元号テーブルを注入済みのサービス

        Environment Variables:
            WAREKI_ERA_SEED_FILE: 元号定義のJSONファイル。未設定なら既定の5元号
        """
        settings = settings or get_settings()

        if settings.era_seed_file is not None:
            logger.info(f"Creating era table from {settings.era_seed_file}")
            repository = InMemoryEraRepository(load_era_seed(settings.era_seed_file))
        else:
            repository = InMemoryEraRepository()

        return CalendarConverterService(repository)


def get_calendar_converter() -> CalendarConverterService:
    """プロセス全体で共有する変換サービスを取得する."""
    global _shared_converter

    if _shared_converter is None:
        with _lock:
            if _shared_converter is None:
                _shared_converter = CalendarConverterFactory.create()
    return _shared_converter


def reset_calendar_converter() -> None:
    """共有インスタンスを破棄する（設定変更後やテスト用）."""
    global _shared_converter

    with _lock:
        _shared_converter = None
