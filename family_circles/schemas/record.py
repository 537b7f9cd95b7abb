"""Record API schemas. Serialized with exclude_none: absent links are omitted."""

from typing import Literal

from pydantic import BaseModel, Field


class IndividualResponse(BaseModel):
    """Individual projection."""

    id: str
    type: Literal["person"] = "person"
    page: str = Field(..., description="Site page of the individual")
    name: str = Field(..., description="Given names")
    avatar: str | None = None
    family: str | None = Field(None, description="First child-family xref")
    families: list[str] | None = Field(None, description="Spouse-family xrefs")


class FamilyResponse(BaseModel):
    """Family projection."""

    id: str
    type: Literal["family"] = "family"
    name: str = Field(..., description="Family surname")
    children: list[str] | None = None
    father: str | None = None
    mother: str | None = None
