"""DTOs for search results (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResultItem:
    """Single search hit: individual or family xref with display text."""

    id: str
    text: str
