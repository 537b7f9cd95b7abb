"""Batch hydration of ORM rows into domain entities.

Shared by the record and search repositories so that a family and all of its
members are loaded with a fixed number of queries.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Collection, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from family_circles.domain.entities import Family, Individual, Name
from family_circles.domain.exceptions import MalformedRecordException
from family_circles.infrastructure.persistence.models import (
    FamilyRow,
    IndividualRow,
    MediaFileRow,
    NameRow,
)
from family_circles.infrastructure.persistence.repositories._gedcom import (
    clean_name_part,
    has_death_fact,
    pointers,
    restriction_of,
)

logger = logging.getLogger(__name__)


def _name_from_row(row: NameRow) -> Name:
    return Name(
        type=row.n_type,
        givn=clean_name_part(row.n_givn),
        surname=clean_name_part(row.n_surname),
        full=row.n_full or "",
    )


async def load_individuals(
    db: AsyncSession, tree_id: int, xrefs: Collection[str]
) -> dict[str, Individual]:
    """Return {xref: Individual} for the xrefs that exist in the tree."""
    if not xrefs:
        return {}
    wanted = set(xrefs)
    rows = (
        await db.execute(
            select(IndividualRow).where(
                IndividualRow.i_file == tree_id, IndividualRow.i_id.in_(wanted)
            )
        )
    ).scalars().all()
    if not rows:
        return {}

    name_rows = (
        await db.execute(
            select(NameRow)
            .where(NameRow.n_file == tree_id, NameRow.n_id.in_(wanted))
            .order_by(NameRow.n_id, NameRow.n_num)
        )
    ).scalars().all()
    names: dict[str, list[Name]] = defaultdict(list)
    for name_row in name_rows:
        names[name_row.n_id].append(_name_from_row(name_row))

    media_xref: dict[str, str] = {}
    for row in rows:
        objects = pointers(row.i_gedcom, "OBJE")
        if objects:
            media_xref[row.i_id] = objects[0]
    media_file: dict[str, str] = {}
    if media_xref:
        media_rows = (
            await db.execute(
                select(MediaFileRow)
                .where(
                    MediaFileRow.m_file == tree_id,
                    MediaFileRow.m_id.in_(set(media_xref.values())),
                )
                .order_by(MediaFileRow.id)
            )
        ).scalars().all()
        for media_row in media_rows:
            media_file.setdefault(media_row.m_id, media_row.multimedia_file_refn)

    result: dict[str, Individual] = {}
    for row in rows:
        obje = media_xref.get(row.i_id)
        result[row.i_id] = Individual(
            xref=row.i_id,
            tree_id=row.i_file,
            names=tuple(names.get(row.i_id, ())),
            sex=row.i_sex or "U",
            restriction=restriction_of(row.i_gedcom),
            is_dead=has_death_fact(row.i_gedcom),
            child_family_xrefs=tuple(pointers(row.i_gedcom, "FAMC")),
            spouse_family_xrefs=tuple(pointers(row.i_gedcom, "FAMS")),
            media_xref=obje,
            media_file=media_file.get(obje) if obje else None,
        )
    return result


def _member(
    family_row: FamilyRow,
    tag: str,
    xref: str | None,
    members: dict[str, Individual],
    strict: bool,
) -> Individual | None:
    """Resolve a family member pointer; a dangling pointer is malformed data."""
    if not xref:
        return None
    member = members.get(xref)
    if member is None:
        if strict:
            raise MalformedRecordException(
                family_row.f_id, f"{tag} @{xref}@ does not exist"
            )
        logger.warning(
            "Family %s (tree %s): dangling %s pointer @%s@ ignored",
            family_row.f_id,
            family_row.f_file,
            tag,
            xref,
        )
    return member


async def load_families(
    db: AsyncSession, rows: Sequence[FamilyRow], *, strict: bool = True
) -> list[Family]:
    """Hydrate family rows (any trees) with spouses and children, keeping row order.

    With strict=True a pointer to a missing individual raises
    MalformedRecordException; otherwise it is logged and dropped.
    """
    if not rows:
        return []
    wanted: dict[int, set[str]] = defaultdict(set)
    children: dict[tuple[str, int], list[str]] = {}
    for row in rows:
        child_xrefs = pointers(row.f_gedcom, "CHIL")
        children[(row.f_id, row.f_file)] = child_xrefs
        wanted[row.f_file].update(x for x in (row.f_husb, row.f_wife) if x)
        wanted[row.f_file].update(child_xrefs)

    members: dict[int, dict[str, Individual]] = {}
    for tree_id, xrefs in wanted.items():
        members[tree_id] = await load_individuals(db, tree_id, xrefs)

    families: list[Family] = []
    for row in rows:
        tree_members = members.get(row.f_file, {})
        kids = [
            _member(row, "CHIL", x, tree_members, strict)
            for x in children[(row.f_id, row.f_file)]
        ]
        families.append(
            Family(
                xref=row.f_id,
                tree_id=row.f_file,
                husband=_member(row, "HUSB", row.f_husb, tree_members, strict),
                wife=_member(row, "WIFE", row.f_wife, tree_members, strict),
                children=tuple(k for k in kids if k is not None),
                restriction=restriction_of(row.f_gedcom),
            )
        )
    return families
