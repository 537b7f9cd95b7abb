"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from family_circles.domain.entities import Family, Individual


class IThumbnailRenderer(Protocol):
    """Renders the HTML markup of an individual's small image."""

    def render(self, individual: Individual, width: int, height: int, fit: str) -> str:
        """Return HTML markup ('' when nothing can be rendered)."""


class IAccessPolicy(Protocol):
    """Decides whether the current viewer may see a record."""

    def can_show_individual(self, individual: Individual) -> bool:
        """Return True if the viewer may see the individual."""

    def can_show_family(self, family: Family) -> bool:
        """Return True if the viewer may see the family."""
