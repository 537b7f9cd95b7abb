"""Application DTOs (read-models returned by use cases; no ORM dependency)."""

from family_circles.application.dtos.record import (
    FamilyProjection,
    IndividualProjection,
    RecordProjection,
)
from family_circles.application.dtos.search import SearchResultItem

__all__ = [
    "FamilyProjection",
    "IndividualProjection",
    "RecordProjection",
    "SearchResultItem",
]
