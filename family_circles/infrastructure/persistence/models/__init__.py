"""ORM models for the genealogy tables (read-only)."""

from family_circles.infrastructure.persistence.models.family import FamilyRow
from family_circles.infrastructure.persistence.models.individual import IndividualRow
from family_circles.infrastructure.persistence.models.media import MediaFileRow
from family_circles.infrastructure.persistence.models.name import NameRow
from family_circles.infrastructure.persistence.models.tree import TreeRow, TreeSettingRow

__all__ = [
    "FamilyRow",
    "IndividualRow",
    "MediaFileRow",
    "NameRow",
    "TreeRow",
    "TreeSettingRow",
]
