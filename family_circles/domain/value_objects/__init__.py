"""Domain value objects."""

from family_circles.domain.value_objects.core import RecordIdentifier

__all__ = ["RecordIdentifier"]
