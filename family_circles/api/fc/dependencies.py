"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the DB session, tree context, viewer, access
policy and use cases. Use cases are built from infrastructure
implementations here; routes depend only on these dependencies.
"""

from __future__ import annotations

from typing import Annotated
from urllib.parse import urlsplit

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from family_circles.application.services.access_policy import AccessPolicy
from family_circles.application.services.search_terms import extract_search_terms
from family_circles.application.use_cases.records import RecordService
from family_circles.application.use_cases.search import SearchService
from family_circles.core.config import get_settings
from family_circles.domain.entities import Tree
from family_circles.domain.enums import RecordKind
from family_circles.domain.exceptions import (
    MissingSearchTermException,
    TreeNotFoundException,
)
from family_circles.domain.value_objects.core import RecordIdentifier
from family_circles.infrastructure.persistence.database import get_db
from family_circles.infrastructure.persistence.repositories import (
    RecordRepository,
    SearchRepository,
    TreeRepository,
)
from family_circles.infrastructure.services.thumbnail_renderer import (
    MediaThumbnailRenderer,
)
from family_circles.shared.context import Viewer

DbSession = Annotated[AsyncSession, Depends(get_db)]


# Request checks that need no tree. Endpoints declare these before TreeContext so
# a bad identifier or an empty search answers 400 even for an unknown tree.


def require_record_kind(xref: str) -> RecordKind:
    """Kind of the {xref} path segment. Raises UnsupportedIdentifierException."""
    return RecordIdentifier(xref).require_kind()


def get_search_terms(
    search: str = Query("", description='Terms; "quoted phrases" match as one'),
) -> list[str]:
    """Terms of the search query parameter. Raises MissingSearchTermException."""
    terms = extract_search_terms(search)
    if not terms:
        raise MissingSearchTermException()
    return terms


async def get_tree(tree: str, db: DbSession) -> Tree:
    """Resolve the {tree} path segment. Raises TreeNotFoundException."""
    found = await TreeRepository(db).get_by_name(tree)
    if found is None:
        raise TreeNotFoundException(tree)
    return found


def get_viewer(request: Request) -> Viewer:
    """Viewer attached by the host (request.state.viewer), else the configured default."""
    viewer = getattr(request.state, "viewer", None)
    if isinstance(viewer, Viewer):
        return viewer
    return Viewer(access_level=get_settings().default_viewer_level)


TreeContext = Annotated[Tree, Depends(get_tree)]
CurrentViewer = Annotated[Viewer, Depends(get_viewer)]


def get_access_policy(tree: TreeContext, viewer: CurrentViewer) -> AccessPolicy:
    """Access policy for this tree and viewer (required by every record/search use case)."""
    return AccessPolicy(tree, viewer.access_level)


def get_thumbnail_renderer(tree: TreeContext, request: Request) -> MediaThumbnailRenderer:
    # Thumbnails live under the same path prefix as the API (see BaseUrlMiddleware).
    base_path = urlsplit(getattr(request.state, "base_url", "")).path
    return MediaThumbnailRenderer(
        tree.name, media_route=get_settings().media_route, base_path=base_path
    )


def get_record_service(
    db: DbSession,
    access: Annotated[AccessPolicy, Depends(get_access_policy)],
    thumbnails: Annotated[MediaThumbnailRenderer, Depends(get_thumbnail_renderer)],
) -> RecordService:
    """Record use case (composition root)."""
    settings = get_settings()
    return RecordService(
        RecordRepository(db),
        thumbnails,
        access,
        thumbnail_width=settings.thumbnail_width,
        thumbnail_height=settings.thumbnail_height,
        thumbnail_fit=settings.thumbnail_fit,
    )


def get_search_service(
    db: DbSession,
    access: Annotated[AccessPolicy, Depends(get_access_policy)],
) -> SearchService:
    """Search use case (composition root)."""
    return SearchService(
        SearchRepository(db),
        access,
        max_results=get_settings().search_max_results,
    )
