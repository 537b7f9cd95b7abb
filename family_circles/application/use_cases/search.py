"""Search use case: extract terms, query the search index, flatten matches."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from family_circles.application.dtos.search import SearchResultItem
from family_circles.application.services.display_names import (
    family_text,
    individual_text,
)
from family_circles.application.services.search_terms import extract_search_terms
from family_circles.domain.exceptions import MissingSearchTermException

if TYPE_CHECKING:
    from family_circles.application.interfaces.repositories import ISearchRepository
    from family_circles.application.interfaces.services import IAccessPolicy
    from family_circles.domain.entities import Family, Tree


def merge_families(*result_sets: Iterable["Family"]) -> list["Family"]:
    """Concatenate family result sets, keeping the first of each (xref, tree_id)."""
    seen: set[tuple[str, int]] = set()
    merged: list[Family] = []
    for families in result_sets:
        for family in families:
            if family.key in seen:
                continue
            seen.add(family.key)
            merged.append(family)
    return merged


class SearchService:
    """Free-text search over individuals and families of one tree."""

    def __init__(
        self,
        search_repo: "ISearchRepository",
        access: "IAccessPolicy",
        max_results: int = 100,
    ) -> None:
        self.search_repo = search_repo
        self.access = access
        self.max_results = max_results

    async def search(self, tree: "Tree", query: str) -> list[SearchResultItem]:
        """Return individuals (search order) followed by families (merged order).

        Raises MissingSearchTermException when the query has no terms.
        """
        terms = extract_search_terms(query)
        if not terms:
            raise MissingSearchTermException()
        return await self.search_terms(tree, terms)

    async def search_terms(self, tree: "Tree", terms: list[str]) -> list[SearchResultItem]:
        """Search with terms already extracted (at least one)."""
        trees = [tree]
        individuals = await self.search_repo.search_individuals(
            trees, terms, self.max_results
        )
        by_member = await self.search_repo.search_families(
            trees, terms, self.max_results
        )
        by_name = await self.search_repo.search_family_names(
            trees, terms, self.max_results
        )
        families = merge_families(by_member, by_name)

        results = [
            SearchResultItem(id=i.xref, text=individual_text(i))
            for i in individuals
            if self.access.can_show_individual(i)
        ]
        results.extend(
            SearchResultItem(id=f.xref, text=family_text(f))
            for f in families
            if self.access.can_show_family(f)
        )
        return results
