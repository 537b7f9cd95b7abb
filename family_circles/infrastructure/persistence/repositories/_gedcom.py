"""Level-1 facts read from raw GEDCOM record text.

Only what projections need: restriction notice, death evidence, and
pointer order (FAMC, FAMS, CHIL, OBJE). Full GEDCOM parsing belongs to the
genealogy application.
"""

import re

from family_circles.domain.enums import Restriction

_RESN_RE = re.compile(r"^1 RESN (.+?)\s*$", re.MULTILINE)
_DEATH_RE = re.compile(r"^1 (?:DEAT|BURI|CREM)\b", re.MULTILINE)

# Placeholders the genealogy application stores for unknown name parts.
UNKNOWN_NAME_PARTS = frozenset({"@N.N.", "@P.N."})


def restriction_of(gedcom: str) -> Restriction | None:
    """Return the record's RESN value, or None."""
    match = _RESN_RE.search(gedcom)
    return Restriction.parse(match.group(1)) if match else None


def has_death_fact(gedcom: str) -> bool:
    """True when the record has a death, burial or cremation fact."""
    return _DEATH_RE.search(gedcom) is not None


def pointers(gedcom: str, tag: str) -> list[str]:
    """Return xrefs of level-1 `tag` pointers in record order."""
    pattern = re.compile(rf"^1 {re.escape(tag)} @([^@]+)@", re.MULTILINE)
    return pattern.findall(gedcom)


def clean_name_part(value: str | None) -> str:
    """Return value, or '' for NULL and unknown-name placeholders."""
    if not value or value in UNKNOWN_NAME_PARTS:
        return ""
    return value
