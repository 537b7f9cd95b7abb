"""Domain value objects for FamilyCircles.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass

from family_circles.domain.enums import RecordKind
from family_circles.domain.exceptions import UnsupportedIdentifierException


@dataclass(frozen=True)
class RecordIdentifier:
    """Record xref as received in a request (e.g. 'I123', 'F7').

    The first character selects the record kind. Anything other than
    'I' or 'F' (including an empty id) is unsupported.
    """

    value: str

    @property
    def kind(self) -> RecordKind | None:
        """Return the record kind, or None when the id is unsupported."""
        if not self.value:
            return None
        try:
            return RecordKind(self.value[0])
        except ValueError:
            return None

    def require_kind(self) -> RecordKind:
        """Return the record kind. Raises UnsupportedIdentifierException if unsupported."""
        kind = self.kind
        if kind is None:
            raise UnsupportedIdentifierException(self.value)
        return kind

    def __str__(self) -> str:
        return self.value
