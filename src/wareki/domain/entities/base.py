"""Base entity class."""


class BaseEntity:
    """Base class for all domain entities.

    エンティティの同一性はIDで判定する。
    """

    def __init__(self, id: int | None = None) -> None:
        self.id = id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if self is other:
            return True
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((self.__class__.__name__, self.id))
