"""AccessPolicy: RESN restrictions, living people and family visibility."""

import pytest

from family_circles.application.services.access_policy import AccessPolicy
from family_circles.domain.entities import Family, Individual, Tree
from family_circles.domain.enums import AccessLevel, Restriction

HIDING_TREE = Tree(id=1, name="demo", hide_living=True)
OPEN_TREE = Tree(id=2, name="open", hide_living=False)

DEAD = Individual(xref="I1", tree_id=1, is_dead=True)
LIVING = Individual(xref="I2", tree_id=1)


def _policy(level: AccessLevel, tree: Tree = HIDING_TREE) -> AccessPolicy:
    return AccessPolicy(tree, level)


@pytest.mark.parametrize(
    ("restriction", "level", "expected"),
    [
        (Restriction.NONE, AccessLevel.VISITOR, True),
        (Restriction.PRIVACY, AccessLevel.VISITOR, False),
        (Restriction.PRIVACY, AccessLevel.MEMBER, True),
        (Restriction.CONFIDENTIAL, AccessLevel.MEMBER, False),
        (Restriction.CONFIDENTIAL, AccessLevel.MANAGER, True),
    ],
)
def test_explicit_restriction(
    restriction: Restriction, level: AccessLevel, expected: bool
) -> None:
    person = Individual(xref="I9", tree_id=1, restriction=restriction, is_dead=True)
    assert _policy(level).can_show_individual(person) is expected


def test_restriction_none_shows_living_to_visitor() -> None:
    person = Individual(xref="I9", tree_id=1, restriction=Restriction.NONE)
    assert _policy(AccessLevel.VISITOR).can_show_individual(person)


def test_living_hidden_from_visitor_only() -> None:
    assert not _policy(AccessLevel.VISITOR).can_show_individual(LIVING)
    assert _policy(AccessLevel.MEMBER).can_show_individual(LIVING)
    assert _policy(AccessLevel.VISITOR).can_show_individual(DEAD)


def test_living_shown_when_tree_does_not_hide() -> None:
    assert _policy(AccessLevel.VISITOR, OPEN_TREE).can_show_individual(LIVING)


def test_locked_follows_default_rules() -> None:
    locked_living = Individual(xref="I9", tree_id=1, restriction=Restriction.LOCKED)
    assert not _policy(AccessLevel.VISITOR).can_show_individual(locked_living)
    assert _policy(AccessLevel.MEMBER).can_show_individual(locked_living)


def test_family_requires_visible_spouses() -> None:
    family = Family(xref="F1", tree_id=1, husband=DEAD, wife=LIVING)
    assert not _policy(AccessLevel.VISITOR).can_show_family(family)
    assert _policy(AccessLevel.MEMBER).can_show_family(family)


def test_family_children_do_not_affect_visibility() -> None:
    family = Family(xref="F1", tree_id=1, husband=DEAD, children=(LIVING,))
    assert _policy(AccessLevel.VISITOR).can_show_family(family)


def test_family_restriction() -> None:
    family = Family(xref="F1", tree_id=1, husband=DEAD, restriction=Restriction.PRIVACY)
    assert not _policy(AccessLevel.VISITOR).can_show_family(family)
    assert _policy(AccessLevel.MEMBER).can_show_family(family)


def test_family_restriction_none_still_checks_spouses() -> None:
    family = Family(xref="F1", tree_id=1, wife=LIVING, restriction=Restriction.NONE)
    assert not _policy(AccessLevel.VISITOR).can_show_family(family)


def test_family_without_spouses_is_visible() -> None:
    assert _policy(AccessLevel.VISITOR).can_show_family(Family(xref="F9", tree_id=1))
