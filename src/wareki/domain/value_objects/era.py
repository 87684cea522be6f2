"""元号を表す値オブジェクト."""

from dataclasses import dataclass
from datetime import date

from wareki.domain.exceptions import InvalidArgumentError


MAX_ERA_NAME_LENGTH = 10


@dataclass(frozen=True)
class Era:
    """元号（開始日から終了日までの連続した期間）.

    開始日・終了日はどちらも期間に含まれる。
    終了日がNoneの元号は現在の元号を表す。
    """

    name: str
    start: date
    end: date | None = None

    def __post_init__(self) -> None:
        if self.name is None or not self.name.strip():
            raise InvalidArgumentError("元号名を指定してください", self.name)

        name = self.name.strip()
        if len(name) > MAX_ERA_NAME_LENGTH:
            raise InvalidArgumentError(
                f"元号名は{MAX_ERA_NAME_LENGTH}文字以下である必要があります: '{name}'",
                name,
            )
        # frozenなのでobject.__setattr__で正規化した名前を設定する
        object.__setattr__(self, "name", name)

        if self.end is not None and self.end < self.start:
            raise InvalidArgumentError(
                f"{name}の終了日（{self.end}）が開始日（{self.start}）より前です",
                self.end,
            )

    @property
    def is_current(self) -> bool:
        """現在も継続中の元号かどうか."""
        return self.end is None

    def contains(self, target_date: date) -> bool:
        """指定日がこの元号の期間内かどうかを返す."""
        if target_date < self.start:
            return False
        if self.end is not None and target_date > self.end:
            return False
        return True

    def duration_in_years(self, as_of: date | None = None) -> int:
        """元号の継続年数を返す.

        Args:
            as_of: 継続中の元号で終了日の代わりに使う基準日（省略時は今日）

        Returns:
            終了年（継続中なら基準年）- 開始年 + 1
        """
        end = self.end or as_of or date.today()
        return end.year - self.start.year + 1

    def __str__(self) -> str:
        end = self.end.isoformat() if self.end else "present"
        return f"{self.name} ({self.start.isoformat()} - {end})"
