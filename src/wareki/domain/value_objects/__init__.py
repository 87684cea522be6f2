"""Domain value objects."""

from wareki.domain.value_objects.era import Era
from wareki.domain.value_objects.japanese_date import JapaneseDate


__all__ = ["Era", "JapaneseDate"]
