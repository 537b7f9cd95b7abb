"""Persistence repositories. Re-exports for dependency injection."""

from family_circles.infrastructure.persistence.repositories.record_repo import (
    RecordRepository,
)
from family_circles.infrastructure.persistence.repositories.search_repo import (
    SearchRepository,
)
from family_circles.infrastructure.persistence.repositories.tree_repo import TreeRepository

__all__ = [
    "RecordRepository",
    "SearchRepository",
    "TreeRepository",
]
