"""Family domain entity."""

from dataclasses import dataclass

from family_circles.domain.entities.individual import Individual
from family_circles.domain.enums import Restriction


@dataclass(frozen=True)
class Family:
    """Family unit: optional husband and wife, ordered children.

    Either spouse may be absent from the record; callers must not assume both.
    """

    xref: str
    tree_id: int
    husband: Individual | None = None
    wife: Individual | None = None
    children: tuple[Individual, ...] = ()
    restriction: Restriction | None = None

    @property
    def spouses(self) -> list[Individual]:
        """Recorded spouses, husband first."""
        return [s for s in (self.husband, self.wife) if s is not None]

    @property
    def key(self) -> tuple[str, int]:
        """Identity across trees: (xref, tree_id)."""
        return (self.xref, self.tree_id)
