"""Tree domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tree:
    """A family tree (one imported GEDCOM file).

    name is the URL slug used in routes; hide_living hides individuals
    without a death record from visitors.
    """

    id: int
    name: str
    title: str = ""
    hide_living: bool = True
