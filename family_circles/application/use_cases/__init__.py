"""Application use cases."""

from family_circles.application.use_cases.records import RecordService
from family_circles.application.use_cases.search import SearchService, merge_families

__all__ = ["RecordService", "SearchService", "merge_families"]
