"""Search repository. Case-insensitive substring match on the name index."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased
from sqlalchemy.sql.elements import ColumnElement

from family_circles.domain.entities import Family, Individual, Tree
from family_circles.infrastructure.persistence.models import FamilyRow, NameRow
from family_circles.infrastructure.persistence.repositories._loaders import (
    load_families,
    load_individuals,
)


def _like_pattern(term: str) -> str:
    """Escape LIKE wildcards % and _ so the term is matched literally."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _matches_any(column: ColumnElement[str], terms: Sequence[str]) -> ColumnElement[bool]:
    return or_(*(column.ilike(_like_pattern(t), escape="\\") for t in terms))


class SearchRepository:
    """Individual and family search across one or more trees.

    A record matches when any term is a substring of a matched name.
    Results are ordered by (tree, xref).
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def search_individuals(
        self, trees: Sequence[Tree], terms: Sequence[str], limit: int
    ) -> list[Individual]:
        """Individuals with any name record whose full name or surname matches."""
        if not trees or not terms:
            return []
        stmt = (
            select(NameRow.n_file, NameRow.n_id)
            .where(
                NameRow.n_file.in_([t.id for t in trees]),
                or_(
                    _matches_any(NameRow.n_full, terms),
                    _matches_any(NameRow.n_surname, terms),
                ),
            )
            .distinct()
            .order_by(NameRow.n_file, NameRow.n_id)
            .limit(limit)
        )
        keys = (await self.db.execute(stmt)).all()

        wanted: dict[int, list[str]] = defaultdict(list)
        for tree_id, xref in keys:
            wanted[tree_id].append(xref)
        loaded: dict[tuple[str, int], Individual] = {}
        for tree_id, xrefs in wanted.items():
            for xref, individual in (await load_individuals(self.db, tree_id, xrefs)).items():
                loaded[(xref, tree_id)] = individual
        return [loaded[(xref, tree_id)] for tree_id, xref in keys if (xref, tree_id) in loaded]

    async def search_families(
        self, trees: Sequence[Tree], terms: Sequence[str], limit: int
    ) -> list[Family]:
        """Families where the husband's or the wife's name matches any term."""
        if not trees or not terms:
            return []
        husband = aliased(NameRow)
        wife = aliased(NameRow)
        stmt = (
            select(FamilyRow.f_file, FamilyRow.f_id)
            .outerjoin(
                husband,
                and_(husband.n_id == FamilyRow.f_husb, husband.n_file == FamilyRow.f_file),
            )
            .outerjoin(
                wife,
                and_(wife.n_id == FamilyRow.f_wife, wife.n_file == FamilyRow.f_file),
            )
            .where(
                FamilyRow.f_file.in_([t.id for t in trees]),
                or_(_matches_any(husband.n_full, terms), _matches_any(wife.n_full, terms)),
            )
            .distinct()
            .order_by(FamilyRow.f_file, FamilyRow.f_id)
            .limit(limit)
        )
        return await self._load_family_keys((await self.db.execute(stmt)).all())

    async def search_family_names(
        self, trees: Sequence[Tree], terms: Sequence[str], limit: int
    ) -> list[Family]:
        """Families whose 'husband wife' full-name string matches any term.

        Catches terms that span both spouses (e.g. 'Jane Smith John').
        """
        if not trees or not terms:
            return []
        husband = aliased(NameRow)
        wife = aliased(NameRow)
        couple = func.coalesce(husband.n_full, "") + " " + func.coalesce(wife.n_full, "")
        stmt = (
            select(FamilyRow.f_file, FamilyRow.f_id)
            .outerjoin(
                husband,
                and_(
                    husband.n_id == FamilyRow.f_husb,
                    husband.n_file == FamilyRow.f_file,
                    husband.n_type == "NAME",
                ),
            )
            .outerjoin(
                wife,
                and_(
                    wife.n_id == FamilyRow.f_wife,
                    wife.n_file == FamilyRow.f_file,
                    wife.n_type == "NAME",
                ),
            )
            .where(
                FamilyRow.f_file.in_([t.id for t in trees]),
                _matches_any(couple, terms),
            )
            .distinct()
            .order_by(FamilyRow.f_file, FamilyRow.f_id)
            .limit(limit)
        )
        return await self._load_family_keys((await self.db.execute(stmt)).all())

    async def _load_family_keys(self, keys: Sequence[tuple[int, str]]) -> list[Family]:
        """Load family rows for (tree_id, xref) keys and hydrate them in key order."""
        if not keys:
            return []
        wanted: dict[int, set[str]] = defaultdict(set)
        for tree_id, xref in keys:
            wanted[tree_id].add(xref)
        rows: dict[tuple[str, int], FamilyRow] = {}
        for tree_id, xrefs in wanted.items():
            result = await self.db.execute(
                select(FamilyRow).where(FamilyRow.f_file == tree_id, FamilyRow.f_id.in_(xrefs))
            )
            for row in result.scalars().all():
                rows[(row.f_id, row.f_file)] = row
        ordered = [rows[(xref, tree_id)] for tree_id, xref in keys if (xref, tree_id) in rows]
        return await load_families(self.db, ordered, strict=False)
