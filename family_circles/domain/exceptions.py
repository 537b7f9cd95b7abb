"""Domain exceptions for FamilyCircles.

Defines domain-level exceptions that represent lookup, access, and request
rule violations. These exceptions are independent of HTTP; the presentation
layer maps them to responses in exception handlers.
"""

from typing import Any


class FamilyCirclesException(Exception):
    """Base exception for all FamilyCircles errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. tree, xref).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class UnsupportedIdentifierException(FamilyCirclesException):
    """Raised when a record id does not start with a supported kind (I or F)."""

    def __init__(self, record_id: str) -> None:
        super().__init__(
            f"id '{record_id}' not supported",
            "UNSUPPORTED_IDENTIFIER",
            {"id": record_id},
        )


class MissingSearchTermException(FamilyCirclesException):
    """Raised when a search query yields no terms."""

    def __init__(self) -> None:
        super().__init__("must specify search term", "MISSING_SEARCH_TERM")


class TreeNotFoundException(FamilyCirclesException):
    """Raised when the tree named in the route does not exist."""

    def __init__(self, tree_name: str) -> None:
        """Initialize with the missing tree name.

        Args:
            tree_name: The tree name (URL slug) that was not found.
        """
        super().__init__(
            f"tree '{tree_name}' not found",
            "TREE_NOT_FOUND",
            {"tree": tree_name},
        )


class RecordNotFoundException(FamilyCirclesException):
    """Raised when an individual or family xref does not exist in the tree."""

    def __init__(self, record_type: str, xref: str) -> None:
        """Initialize with record type and xref.

        Args:
            record_type: 'individual' or 'family'.
            xref: The xref that was not found.
        """
        super().__init__(
            f"{record_type} '{xref}' not found",
            "RECORD_NOT_FOUND",
            {"record_type": record_type, "xref": xref},
        )


class RecordAccessDeniedException(FamilyCirclesException):
    """Raised when the viewer is not allowed to see a record."""

    def __init__(self, record_type: str, xref: str) -> None:
        super().__init__(
            f"access to {record_type} '{xref}' denied",
            "ACCESS_DENIED",
            {"record_type": record_type, "xref": xref},
        )


class MalformedRecordException(FamilyCirclesException):
    """Raised when a stored record cannot be projected (e.g. broken pointers)."""

    def __init__(self, xref: str, reason: str) -> None:
        """Initialize with xref and reason.

        Args:
            xref: Record whose data is malformed.
            reason: Human-readable reason (e.g. 'dangling HUSB pointer').
        """
        super().__init__(
            f"record '{xref}' is malformed: {reason}",
            "MALFORMED_RECORD",
            {"xref": xref, "reason": reason},
        )
