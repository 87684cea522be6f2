"""元号シードデータ.

起動時に一度だけ元号テーブルを構築するためのデータを提供する。
既定の5元号（明治〜令和）のほか、JSONファイルから読み込むこともできる。

JSONファイルの形式::

    [
        {"name": "Meiji", "start": "1868-01-25", "end": "1912-07-29"},
        ...
        {"name": "Reiwa", "start": "2019-05-01", "end": null}
    ]
"""

import logging

from datetime import date
from pathlib import Path

from pydantic import (
    BaseModel,
    ConfigDict,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from wareki.domain.exceptions import InvalidArgumentError
from wareki.domain.value_objects.era import Era


logger = logging.getLogger(__name__)


class EraSeedRecord(BaseModel):
    """シードファイルの1レコード."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    start: date
    end: date | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return value.strip()

    def to_era(self) -> Era:
        return Era(name=self.name, start=self.start, end=self.end)


# 元号定義（古い順）
DEFAULT_ERA_SEED: tuple[EraSeedRecord, ...] = (
    EraSeedRecord(name="Meiji", start=date(1868, 1, 25), end=date(1912, 7, 29)),
    EraSeedRecord(name="Taisho", start=date(1912, 7, 30), end=date(1926, 12, 24)),
    EraSeedRecord(name="Showa", start=date(1926, 12, 25), end=date(1989, 1, 7)),
    EraSeedRecord(name="Heisei", start=date(1989, 1, 8), end=date(2019, 4, 30)),
    EraSeedRecord(name="Reiwa", start=date(2019, 5, 1), end=None),
)

_SEED_ADAPTER = TypeAdapter(list[EraSeedRecord])


def default_eras() -> list[Era]:
    """既定の5元号を古い順に返す."""
    return [record.to_era() for record in DEFAULT_ERA_SEED]


def load_era_seed(path: str | Path) -> list[Era]:
    """JSONファイルから元号定義を読み込む.

    Args:
        path: シードファイルのパス

    Returns:
        ファイル記載順の元号リスト

    Raises:
        InvalidArgumentError: ファイルを読み込めない、または内容が不正な場合
    """
    seed_path = Path(path)
    logger.debug(f"Loading era seed from {seed_path}")

    try:
        content = seed_path.read_bytes()
    except OSError as e:
        raise InvalidArgumentError(
            f"元号シードファイルを読み込めません: {seed_path}: {e}", str(seed_path)
        ) from e

    try:
        records = _SEED_ADAPTER.validate_json(content)
    except ValidationError as e:
        raise InvalidArgumentError(
            f"元号シードファイルの形式が不正です: {seed_path}: {e}", str(seed_path)
        ) from e

    if not records:
        raise InvalidArgumentError(
            f"元号シードファイルに元号が定義されていません: {seed_path}",
            str(seed_path),
        )

    return [record.to_era() for record in records]
