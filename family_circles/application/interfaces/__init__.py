"""Application ports (Protocols implemented by infrastructure)."""

from family_circles.application.interfaces.repositories import (
    IRecordRepository,
    ISearchRepository,
    ITreeRepository,
)
from family_circles.application.interfaces.services import (
    IAccessPolicy,
    IThumbnailRenderer,
)

__all__ = [
    "IAccessPolicy",
    "IRecordRepository",
    "ISearchRepository",
    "IThumbnailRenderer",
    "ITreeRepository",
]
