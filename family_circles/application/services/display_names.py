"""Display text for search results.

Individuals read as '<given> <surname>[/<married surname>...]'; families read
as '<surname> <husband given>/<wife given>'.
"""

from family_circles.domain.entities import Family, Individual


def individual_text(individual: Individual) -> str:
    """Return '<given> <surname>' built from the individual's name records.

    Primary name records set the given name and surname (a later primary
    record overrides an earlier one where it is non-empty). Each married-name
    record appends its surname after a '/'.
    """
    given = ""
    surname = ""
    for name in individual.names:
        if name.is_primary:
            if name.givn:
                given = name.givn
            if name.surname:
                surname = name.surname
        elif name.is_married:
            if surname:
                surname += "/"
            surname += name.surname
    return f"{given} {surname}"


def family_text(family: Family) -> str:
    """Return '<surname> <given>' aggregated over husband then wife.

    surname is the first non-empty primary surname found; given names of
    every primary name record are joined with '/'.
    """
    given = ""
    surname = ""
    for spouse in family.spouses:
        for name in spouse.names:
            if not name.is_primary:
                continue
            if name.givn:
                if given:
                    given += "/"
                given += name.givn
            if name.surname and not surname:
                surname = name.surname
    return f"{surname} {given}"
