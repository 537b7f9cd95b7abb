"""FamilyCircles API (/fc): config, record get-by-id, search."""

from family_circles.api.fc.router import fc_router

__all__ = ["fc_router"]
