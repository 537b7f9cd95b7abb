"""Domain enumerations for FamilyCircles.

Enums represent fixed sets of genealogy values (GEDCOM name types,
record restrictions) and viewer access levels.
"""

from enum import Enum, IntEnum


class NameType(str, Enum):
    """GEDCOM name record type as stored in the name index.

    Only PRIMARY and MARRIED take part in display-text building; the others
    are carried so that records round-trip from storage unchanged.
    """

    PRIMARY = "NAME"
    MARRIED = "_MARNM"
    ALSO_KNOWN_AS = "_AKA"
    HEBREW = "_HEB"
    ADOPTED = "adopted"
    BIRTH = "birth"
    MAIDEN = "maiden"
    RELIGIOUS = "religious"


class Restriction(str, Enum):
    """GEDCOM RESN (restriction notice) values."""

    NONE = "none"
    PRIVACY = "privacy"
    CONFIDENTIAL = "confidential"
    LOCKED = "locked"

    @classmethod
    def parse(cls, value: str | None) -> "Restriction | None":
        """Return the restriction for a RESN value, or None when absent or unknown."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class AccessLevel(IntEnum):
    """Viewer access level. Higher values see more."""

    VISITOR = 0
    MEMBER = 1
    MANAGER = 2

    @classmethod
    def names(cls) -> list[str]:
        """Return all level names in lowercase (for settings validation)."""
        return [level.name.lower() for level in cls]

    @classmethod
    def parse(cls, value: str) -> "AccessLevel":
        """Return the level for a case-insensitive name. Raises KeyError if unknown."""
        return cls[value.strip().upper()]


class RecordKind(str, Enum):
    """Record type discriminator: first character of a record xref."""

    INDIVIDUAL = "I"
    FAMILY = "F"
