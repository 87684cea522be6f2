"""In-memory era repository implementation."""

import logging

from collections.abc import Iterable
from datetime import date, timedelta

from wareki.domain.entities.era_info import EraInfo
from wareki.domain.exceptions import InvalidArgumentError
from wareki.domain.repositories.era_repository import EraRepository
from wareki.domain.value_objects.era import Era
from wareki.infrastructure.config.era_seed import default_eras


logger = logging.getLogger(__name__)


class InMemoryEraRepository(EraRepository):
    """メモリ上の元号テーブル.

    構築時に以下の不変条件を検証する:

    - 元号は開始日の昇順に並ぶ
    - 終了日のない（現在の）元号はちょうど1つで、最後に位置する
    - 前の元号の終了日の翌日が次の元号の開始日になる（重複・欠落なし）
    - 元号名は一意
    """

    def __init__(self, eras: Iterable[Era] | None = None) -> None:
        """元号テーブルを構築する.

        Args:
            eras: 古い順の元号（省略時は明治〜令和の既定データ）

        Raises:
            InvalidArgumentError: 不変条件を満たさない場合
        """
        era_list = list(eras) if eras is not None else default_eras()
        self._validate(era_list)
        self._eras: tuple[EraInfo, ...] = tuple(
            EraInfo(id=i, era=era, order=i) for i, era in enumerate(era_list, 1)
        )
        self._by_name = {info.era.name: info for info in self._eras}
        logger.debug(
            f"Era table built: {', '.join(info.era.name for info in self._eras)}"
        )

    @staticmethod
    def _validate(eras: list[Era]) -> None:
        if not eras:
            raise InvalidArgumentError("元号テーブルには1つ以上の元号が必要です")

        names = [era.name for era in eras]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise InvalidArgumentError(
                f"元号名が重複しています: {', '.join(duplicates)}", duplicates
            )

        current = [era for era in eras if era.is_current]
        if len(current) != 1:
            raise InvalidArgumentError(
                f"現在の元号（終了日なし）はちょうど1つである必要があります: {len(current)}件",
                len(current),
            )

        for previous, following in zip(eras, eras[1:], strict=False):
            if previous.end is None:
                raise InvalidArgumentError(
                    f"現在の元号は最後に定義する必要があります: {previous.name}",
                    previous.name,
                )
            expected_start = previous.end + timedelta(days=1)
            if following.start != expected_start:
                raise InvalidArgumentError(
                    f"{following.name}の開始日（{following.start}）は"
                    f"{previous.name}の終了日の翌日（{expected_start}）である必要があります",
                    following.start,
                )

    def get_all(self) -> list[EraInfo]:
        return list(self._eras)

    def get_by_id(self, era_id: int) -> EraInfo | None:
        return next((info for info in self._eras if info.id == era_id), None)

    def get_by_name(self, name: str) -> EraInfo | None:
        if not name:
            raise InvalidArgumentError("元号名を指定してください", name)
        return self._by_name.get(name)

    def get_by_date(self, target_date: date) -> EraInfo | None:
        for info in self._eras:
            if info.contains(target_date):
                return info
        logger.debug(f"No era contains {target_date}")
        return None

    def get_current(self) -> EraInfo | None:
        return next((info for info in self._eras if info.era.is_current), None)

    def get_overlapping(self, range_start: date, range_end: date) -> list[EraInfo]:
        if range_start > range_end:
            raise InvalidArgumentError(
                f"開始日（{range_start}）は終了日（{range_end}）以前である必要があります",
                (range_start, range_end),
            )

        return [
            info
            for info in self._eras
            if info.era.start <= range_end
            and (info.era.end is None or info.era.end >= range_start)
        ]

    def succeeded_by(self, name: str, start: date) -> "InMemoryEraRepository":
        """新元号を追加したテーブルを返す.

        現在の元号を新元号の開始日の前日で終了させ、新元号を末尾に追加する。
        このテーブル自体は変更しない。

        Args:
            name: 新元号名
            start: 新元号の開始日

        Raises:
            InvalidArgumentError: 開始日が現在の元号の開始日以前の場合など
        """
        eras = [info.era for info in self._eras]
        current = eras[-1]
        if start <= current.start:
            raise InvalidArgumentError(
                f"新元号の開始日（{start}）は{current.name}の開始日（{current.start}）より後である必要があります",
                start,
            )

        closed = Era(current.name, current.start, start - timedelta(days=1))
        return InMemoryEraRepository([*eras[:-1], closed, Era(name, start)])
