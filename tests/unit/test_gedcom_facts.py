"""Level-1 GEDCOM facts read from raw record text."""

from family_circles.domain.enums import Restriction
from family_circles.infrastructure.persistence.repositories._gedcom import (
    clean_name_part,
    has_death_fact,
    pointers,
    restriction_of,
)

RECORD = "\n".join(
    [
        "0 @I1@ INDI",
        "1 NAME John /Smith/",
        "1 RESN confidential",
        "1 FAMS @F2@",
        "1 FAMC @F1@",
        "1 FAMS @F3@",
        "2 _NOTE 1 FAMS @F9@",
        "1 OBJE @M1@",
    ]
)


def test_restriction_of() -> None:
    assert restriction_of(RECORD) is Restriction.CONFIDENTIAL
    assert restriction_of("0 @I2@ INDI") is None
    assert restriction_of("0 @I2@ INDI\n2 RESN privacy") is None


def test_has_death_fact() -> None:
    assert not has_death_fact(RECORD)
    assert has_death_fact("0 @I1@ INDI\n1 DEAT Y")
    assert has_death_fact("0 @I1@ INDI\n1 CREM\n2 DATE 1900")
    assert not has_death_fact("0 @I1@ INDI\n1 DEATH_NOTE x")


def test_pointers_keep_record_order() -> None:
    assert pointers(RECORD, "FAMS") == ["F2", "F3"]
    assert pointers(RECORD, "FAMC") == ["F1"]
    assert pointers(RECORD, "OBJE") == ["M1"]
    assert pointers(RECORD, "CHIL") == []


def test_clean_name_part() -> None:
    assert clean_name_part(None) == ""
    assert clean_name_part("@N.N.") == ""
    assert clean_name_part("@P.N.") == ""
    assert clean_name_part("Smith") == "Smith"
