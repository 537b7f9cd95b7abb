"""Search API schemas."""

from pydantic import BaseModel


class SearchResultItemResponse(BaseModel):
    """Single search hit (individual or family)."""

    id: str
    text: str
