"""DTOs for record projections (individual and family)."""

from dataclasses import dataclass
from typing import Literal, TypeAlias


@dataclass(frozen=True)
class IndividualProjection:
    """Flattened individual. Optional fields are None when absent."""

    id: str
    page: str
    name: str
    avatar: str | None = None
    family: str | None = None  # first child-family (FAMC)
    families: tuple[str, ...] | None = None  # spouse families (FAMS)
    type: Literal["person"] = "person"


@dataclass(frozen=True)
class FamilyProjection:
    """Flattened family. father/mother are None when the spouse is not recorded."""

    id: str
    name: str
    children: tuple[str, ...] | None = None
    father: str | None = None
    mother: str | None = None
    type: Literal["family"] = "family"


RecordProjection: TypeAlias = IndividualProjection | FamilyProjection
