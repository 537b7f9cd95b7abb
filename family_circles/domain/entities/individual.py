"""Individual domain entity.

Represents a person record and its name records, independent of persistence.
"""

from dataclasses import dataclass

from family_circles.domain.enums import NameType, Restriction


@dataclass(frozen=True)
class Name:
    """One name record of an individual (primary, married, alias, ...)."""

    type: str
    givn: str = ""
    surname: str = ""
    full: str = ""

    @property
    def is_primary(self) -> bool:
        return self.type == NameType.PRIMARY.value

    @property
    def is_married(self) -> bool:
        return self.type == NameType.MARRIED.value


@dataclass(frozen=True)
class Individual:
    """Person record.

    names, child_family_xrefs (FAMC) and spouse_family_xrefs (FAMS) keep the
    order of the underlying record. media_file is the file of the first
    linked media object, if any.
    """

    xref: str
    tree_id: int
    names: tuple[Name, ...] = ()
    sex: str = "U"
    restriction: Restriction | None = None
    is_dead: bool = False
    child_family_xrefs: tuple[str, ...] = ()
    spouse_family_xrefs: tuple[str, ...] = ()
    media_xref: str | None = None
    media_file: str | None = None

    @property
    def first_name_record(self) -> Name | None:
        """Return the first name record in record order, or None."""
        return self.names[0] if self.names else None

    @property
    def given_name(self) -> str:
        """Given names of the first name record ('' when there is none)."""
        first = self.first_name_record
        return first.givn if first else ""

    @property
    def surname(self) -> str:
        """Surname of the first name record ('' when there is none)."""
        first = self.first_name_record
        return first.surname if first else ""

    @property
    def full_name(self) -> str:
        first = self.first_name_record
        return first.full if first else ""
