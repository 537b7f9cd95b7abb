"""Application services: access policy, search terms, display text, page links."""

from family_circles.application.services.access_policy import AccessPolicy
from family_circles.application.services.display_names import (
    family_text,
    individual_text,
)
from family_circles.application.services.page_links import (
    first_image_url,
    individual_page_url,
    strip_query,
)
from family_circles.application.services.search_terms import extract_search_terms

__all__ = [
    "AccessPolicy",
    "extract_search_terms",
    "family_text",
    "first_image_url",
    "individual_page_url",
    "individual_text",
    "strip_query",
]
