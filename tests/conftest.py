"""共通フィクスチャ."""

from collections.abc import Iterator
from datetime import date

import pytest

from wareki.application.services.japanese_date_formatter import (
    JapaneseDateFormatter,
)
from wareki.domain.services.calendar_converter_service import (
    CalendarConverterService,
)
from wareki.infrastructure.config.settings import get_settings
from wareki.infrastructure.persistence.in_memory_era_repository import (
    InMemoryEraRepository,
)
from wareki.infrastructure.config.calendar_converter import (
    reset_calendar_converter,
)


FIXED_TODAY = date(2023, 12, 25)


@pytest.fixture
def era_repository() -> InMemoryEraRepository:
    return InMemoryEraRepository()


@pytest.fixture
def converter(era_repository: InMemoryEraRepository) -> CalendarConverterService:
    return CalendarConverterService(era_repository, clock=lambda: FIXED_TODAY)


@pytest.fixture
def formatter(converter: CalendarConverterService) -> JapaneseDateFormatter:
    return JapaneseDateFormatter(converter)


@pytest.fixture(autouse=True)
def _isolate_shared_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """環境変数由来の設定と共有インスタンスをテストごとに初期化する."""
    for key in ("WAREKI_LOG_LEVEL", "WAREKI_LOG_JSON", "WAREKI_ERA_SEED_FILE"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    reset_calendar_converter()
    yield
    get_settings.cache_clear()
    reset_calendar_converter()
