"""Tree and record repositories against the seeded demo database."""

import pytest

from family_circles.domain.enums import Restriction
from family_circles.domain.exceptions import MalformedRecordException
from family_circles.infrastructure.persistence.repositories import (
    RecordRepository,
    TreeRepository,
)


@pytest.mark.requires_db
async def test_tree_by_name(db_session) -> None:
    tree = await TreeRepository(db_session).get_by_name("demo")
    assert tree is not None
    assert tree.id == 1
    assert tree.title == "Demo Tree"
    assert tree.hide_living is True


@pytest.mark.requires_db
async def test_tree_not_found(db_session) -> None:
    assert await TreeRepository(db_session).get_by_name("nope") is None


@pytest.mark.requires_db
async def test_get_individual_hydrates_names_links_and_media(db_session, demo_tree) -> None:
    person = await RecordRepository(db_session).get_individual(demo_tree, "I2")
    assert person is not None
    assert [(n.type, n.surname) for n in person.names] == [("NAME", "Jones"), ("_MARNM", "Smith")]
    assert person.spouse_family_xrefs == ("F1",)
    assert person.child_family_xrefs == ()
    assert person.is_dead is True
    assert person.sex == "F"
    assert person.media_xref is None

    john = await RecordRepository(db_session).get_individual(demo_tree, "I1")
    assert john.media_xref == "M1"
    assert john.media_file == "photos/john.jpg"


@pytest.mark.requires_db
async def test_get_individual_restriction_and_living(db_session, demo_tree) -> None:
    repo = RecordRepository(db_session)
    assert (await repo.get_individual(demo_tree, "I5")).restriction is Restriction.PRIVACY
    assert (await repo.get_individual(demo_tree, "I4")).is_dead is False


@pytest.mark.requires_db
async def test_get_individual_missing(db_session, demo_tree) -> None:
    assert await RecordRepository(db_session).get_individual(demo_tree, "I999") is None


@pytest.mark.requires_db
async def test_get_family(db_session, demo_tree) -> None:
    family = await RecordRepository(db_session).get_family(demo_tree, "F1")
    assert family is not None
    assert family.husband.xref == "I1"
    assert family.wife.xref == "I2"
    assert [c.xref for c in family.children] == ["I3", "I4"]


@pytest.mark.requires_db
async def test_get_family_single_spouse(db_session, demo_tree) -> None:
    family = await RecordRepository(db_session).get_family(demo_tree, "F2")
    assert family.husband is None
    assert family.wife.xref == "I6"
    assert family.children == ()


@pytest.mark.requires_db
async def test_get_family_dangling_member_raises(db_session, demo_tree) -> None:
    with pytest.raises(MalformedRecordException):
        await RecordRepository(db_session).get_family(demo_tree, "F3")


@pytest.mark.requires_db
async def test_get_families_keeps_order_and_drops_dangling(db_session, demo_tree) -> None:
    families = await RecordRepository(db_session).get_families(
        demo_tree, ["F3", "F999", "F1", "F3"]
    )
    assert [f.xref for f in families] == ["F3", "F1"]
    assert families[0].husband is None
    assert families[0].wife.xref == "I6"
