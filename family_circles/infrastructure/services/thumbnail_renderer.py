"""Thumbnail markup for an individual's primary media object (Jinja)."""

from __future__ import annotations

from urllib.parse import urlencode

from jinja2 import Environment, Template

from family_circles.domain.entities import Individual

# Key -> template. Context: src, alt, width, height, fit, sex.
_DEFAULT_TEMPLATES: dict[str, str] = {
    "image": (
        '<img src="{{ src }}" alt="{{ alt }}" class="img-thumbnail"'
        ' width="{{ width }}" height="{{ height }}" style="object-fit: {{ fit }}">'
    ),
    # No media: a silhouette icon, which carries no src.
    "silhouette": '<i class="icon-silhouette icon-silhouette-{{ sex | lower }}"></i>',
}


class MediaThumbnailRenderer:
    """Renders <img> markup pointing at the media-thumbnail route of the tree.

    media_route may contain '{tree}'; the tree name is substituted. The
    thumbnail query carries xref, file, w, h and fit. base_path is the path
    prefix the site is served under (e.g. '/webtrees').
    """

    def __init__(
        self,
        tree_name: str,
        media_route: str = "/tree/{tree}/media-thumbnail",
        templates: dict[str, str] | None = None,
        base_path: str = "",
    ) -> None:
        self.tree_name = tree_name
        self.media_route = media_route
        self.base_path = base_path.rstrip("/")
        self._env = Environment(autoescape=True)
        self._compiled: dict[str, Template] = {
            key: self._env.from_string(source)
            for key, source in (templates or _DEFAULT_TEMPLATES).items()
        }

    def thumbnail_src(self, individual: Individual, width: int, height: int, fit: str) -> str:
        route = self.base_path + self.media_route.replace("{tree}", self.tree_name)
        query = urlencode(
            {
                "xref": individual.media_xref or "",
                "file": individual.media_file or "",
                "w": width,
                "h": height,
                "fit": fit,
            }
        )
        return f"{route}?{query}"

    def render(self, individual: Individual, width: int, height: int, fit: str) -> str:
        """Return image markup, or silhouette markup when the individual has no media."""
        if not individual.media_xref or not individual.media_file:
            return self._compiled["silhouette"].render(sex=individual.sex or "U")
        return self._compiled["image"].render(
            src=self.thumbnail_src(individual, width, height, fit),
            alt=individual.full_name or individual.xref,
            width=width,
            height=height,
            fit=fit,
        )
