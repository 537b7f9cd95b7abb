"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from family_circles.domain.entities import Family, Individual, Tree


class ITreeRepository(Protocol):
    """Protocol for tree lookup."""

    async def get_by_name(self, name: str) -> Tree | None:
        """Return the tree with this URL name, or None."""


class IRecordRepository(Protocol):
    """Protocol for loading individuals and families within a tree."""

    async def get_individual(self, tree: Tree, xref: str) -> Individual | None:
        """Return the individual, or None when the xref does not exist in the tree."""

    async def get_family(self, tree: Tree, xref: str) -> Family | None:
        """Return the family with spouses and children loaded, or None."""

    async def get_families(self, tree: Tree, xrefs: Sequence[str]) -> list[Family]:
        """Return existing families for xrefs, in the order of xrefs (missing ones skipped)."""


class ISearchRepository(Protocol):
    """Protocol for the genealogy search index."""

    async def search_individuals(
        self, trees: Sequence[Tree], terms: Sequence[str], limit: int
    ) -> list[Individual]:
        """Individuals with a name matching any term."""

    async def search_families(
        self, trees: Sequence[Tree], terms: Sequence[str], limit: int
    ) -> list[Family]:
        """Families where the husband's or the wife's name matches any term."""

    async def search_family_names(
        self, trees: Sequence[Tree], terms: Sequence[str], limit: int
    ) -> list[Family]:
        """Families whose combined spouse names ('husband wife') match any term."""
