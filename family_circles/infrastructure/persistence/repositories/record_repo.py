"""Record repository: individuals and families of one tree, as domain entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from family_circles.domain.entities import Family, Individual, Tree
from family_circles.infrastructure.persistence.models import FamilyRow
from family_circles.infrastructure.persistence.repositories._loaders import (
    load_families,
    load_individuals,
)


class RecordRepository:
    """Loads individuals and families with their names, media and members."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_individual(self, tree: Tree, xref: str) -> Individual | None:
        found = await load_individuals(self.db, tree.id, [xref])
        return found.get(xref)

    async def get_family(self, tree: Tree, xref: str) -> Family | None:
        """Return the family, or None. Dangling member pointers raise MalformedRecordException."""
        row = (
            await self.db.execute(
                select(FamilyRow).where(FamilyRow.f_file == tree.id, FamilyRow.f_id == xref)
            )
        ).scalar_one_or_none()
        if row is None:
            return None
        families = await load_families(self.db, [row], strict=True)
        return families[0]

    async def get_families(self, tree: Tree, xrefs: Sequence[str]) -> list[Family]:
        """Return existing families in the order of xrefs. Dangling members are dropped."""
        if not xrefs:
            return []
        rows = (
            await self.db.execute(
                select(FamilyRow).where(
                    FamilyRow.f_file == tree.id, FamilyRow.f_id.in_(set(xrefs))
                )
            )
        ).scalars().all()
        by_xref = {row.f_id: row for row in rows}
        ordered = [by_xref[x] for x in dict.fromkeys(xrefs) if x in by_xref]
        return await load_families(self.db, ordered, strict=False)
