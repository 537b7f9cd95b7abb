"""Record use case: load an individual or family and flatten it for the client."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from family_circles.application.dtos.record import (
    FamilyProjection,
    IndividualProjection,
    RecordProjection,
)
from family_circles.application.services.page_links import (
    first_image_url,
    individual_page_url,
    strip_query,
)
from family_circles.domain.enums import RecordKind
from family_circles.domain.exceptions import (
    RecordAccessDeniedException,
    RecordNotFoundException,
)
from family_circles.domain.value_objects.core import RecordIdentifier

if TYPE_CHECKING:
    from family_circles.application.interfaces.repositories import IRecordRepository
    from family_circles.application.interfaces.services import (
        IAccessPolicy,
        IThumbnailRenderer,
    )
    from family_circles.domain.entities import Tree

logger = logging.getLogger(__name__)


class RecordService:
    """Get-by-id for individuals (xref 'I...') and families (xref 'F...').

    Every record passes the access policy before it is projected; linked
    families and children the viewer may not see are left out.
    """

    def __init__(
        self,
        records: "IRecordRepository",
        thumbnails: "IThumbnailRenderer",
        access: "IAccessPolicy",
        thumbnail_width: int = 200,
        thumbnail_height: int = 200,
        thumbnail_fit: str = "contain",
    ) -> None:
        self.records = records
        self.thumbnails = thumbnails
        self.access = access
        self.thumbnail_width = thumbnail_width
        self.thumbnail_height = thumbnail_height
        self.thumbnail_fit = thumbnail_fit

    async def get_record(
        self,
        tree: "Tree",
        record_id: str,
        url: str,
        query_params: Sequence[tuple[str, str]] = (),
    ) -> RecordProjection:
        """Dispatch on the first character of record_id.

        Raises:
            UnsupportedIdentifierException: id does not start with I or F.
            RecordNotFoundException: no such record in the tree.
            RecordAccessDeniedException: the viewer may not see the record.
        """
        kind = RecordIdentifier(record_id).require_kind()
        if kind is RecordKind.INDIVIDUAL:
            return await self.get_individual(tree, record_id, url, query_params)
        return await self.get_family(tree, record_id)

    async def get_individual(
        self,
        tree: "Tree",
        xref: str,
        url: str,
        query_params: Sequence[tuple[str, str]] = (),
    ) -> IndividualProjection:
        individual = await self.records.get_individual(tree, xref)
        if individual is None:
            raise RecordNotFoundException("individual", xref)
        if not self.access.can_show_individual(individual):
            logger.info("Access denied: individual %s in tree %s", xref, tree.name)
            raise RecordAccessDeniedException("individual", xref)

        markup = self.thumbnails.render(
            individual,
            self.thumbnail_width,
            self.thumbnail_height,
            self.thumbnail_fit,
        )
        avatar = first_image_url(markup, strip_query(url))

        linked = await self.records.get_families(
            tree,
            [*individual.child_family_xrefs, *individual.spouse_family_xrefs],
        )
        visible = {f.xref for f in linked if self.access.can_show_family(f)}
        child_families = [x for x in individual.child_family_xrefs if x in visible]
        spouse_families = [x for x in individual.spouse_family_xrefs if x in visible]

        return IndividualProjection(
            id=individual.xref,
            page=individual_page_url(url, query_params),
            name=individual.given_name,
            avatar=avatar,
            family=child_families[0] if child_families else None,
            families=tuple(spouse_families) if spouse_families else None,
        )

    async def get_family(self, tree: "Tree", xref: str) -> FamilyProjection:
        family = await self.records.get_family(tree, xref)
        if family is None:
            raise RecordNotFoundException("family", xref)
        if not self.access.can_show_family(family):
            logger.info("Access denied: family %s in tree %s", xref, tree.name)
            raise RecordAccessDeniedException("family", xref)

        children = [c for c in family.children if self.access.can_show_individual(c)]

        # First child's surname, then husband's, then wife's.
        candidates = [children[0] if children else None, family.husband, family.wife]
        name = next((p.surname for p in candidates if p is not None and p.surname), "")

        return FamilyProjection(
            id=family.xref,
            name=name,
            children=tuple(c.xref for c in children) if children else None,
            father=family.husband.xref if family.husband else None,
            mother=family.wife.xref if family.wife else None,
        )
