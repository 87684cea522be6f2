"""wareki: 西暦と和暦（元号）の相互変換ライブラリ."""

from wareki.domain.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    NotConvertibleError,
    NotFoundError,
    OutOfRangeError,
    WarekiError,
)
from wareki.domain.services.calendar_converter_service import (
    CalendarConverterService,
)
from wareki.domain.value_objects.era import Era
from wareki.domain.value_objects.japanese_date import JapaneseDate
from wareki.infrastructure.config.calendar_converter import (
    get_calendar_converter,
)
from wareki.infrastructure.persistence.in_memory_era_repository import (
    InMemoryEraRepository,
)


__version__ = "0.1.0"

__all__ = [
    "CalendarConverterService",
    "Era",
    "InMemoryEraRepository",
    "InvalidArgumentError",
    "InvalidStateError",
    "JapaneseDate",
    "NotConvertibleError",
    "NotFoundError",
    "OutOfRangeError",
    "WarekiError",
    "get_calendar_converter",
]
