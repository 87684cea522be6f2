"""Domain entities."""

from wareki.domain.entities.base import BaseEntity
from wareki.domain.entities.era_info import EraInfo


__all__ = ["BaseEntity", "EraInfo"]
