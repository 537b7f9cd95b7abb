"""Access policy: record visibility for the current viewer (GEDCOM RESN rules)."""

from __future__ import annotations

from family_circles.domain.entities import Family, Individual, Tree
from family_circles.domain.enums import AccessLevel, Restriction

# Minimum level per explicit restriction. LOCKED only blocks edits, so it
# falls through to the default rules like an absent restriction.
_RESTRICTION_LEVEL: dict[Restriction, AccessLevel] = {
    Restriction.NONE: AccessLevel.VISITOR,
    Restriction.PRIVACY: AccessLevel.MEMBER,
    Restriction.CONFIDENTIAL: AccessLevel.MANAGER,
}


class AccessPolicy:
    """Visibility checks for one tree and one viewer access level.

    Rules:
    - RESN none: everyone; privacy: member and above; confidential: manager.
    - No RESN (or locked): everyone, except that living individuals in a
      tree with hide_living are member-only.
    - A family is visible when its own restriction allows and every recorded
      spouse is visible.
    """

    def __init__(self, tree: Tree, access_level: AccessLevel) -> None:
        self.tree = tree
        self.access_level = access_level

    def _allowed_by_restriction(self, restriction: Restriction | None) -> bool | None:
        """True/False for explicit restrictions; None when default rules apply."""
        if restriction is None or restriction not in _RESTRICTION_LEVEL:
            return None
        return self.access_level >= _RESTRICTION_LEVEL[restriction]

    def can_show_individual(self, individual: Individual) -> bool:
        """Return True if the viewer may see the individual."""
        allowed = self._allowed_by_restriction(individual.restriction)
        if allowed is not None:
            return allowed
        if self.tree.hide_living and not individual.is_dead:
            return self.access_level >= AccessLevel.MEMBER
        return True

    def can_show_family(self, family: Family) -> bool:
        """Return True if the viewer may see the family and all its spouses."""
        allowed = self._allowed_by_restriction(family.restriction)
        if allowed is False:
            return False
        return all(self.can_show_individual(s) for s in family.spouses)
