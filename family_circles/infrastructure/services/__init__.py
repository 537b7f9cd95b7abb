"""Infrastructure services (rendering)."""

from family_circles.infrastructure.services.thumbnail_renderer import (
    MediaThumbnailRenderer,
)

__all__ = ["MediaThumbnailRenderer"]
