"""Domain entities (read models loaded from the genealogy store)."""

from family_circles.domain.entities.family import Family
from family_circles.domain.entities.individual import Individual, Name
from family_circles.domain.entities.tree import Tree

__all__ = ["Family", "Individual", "Name", "Tree"]
