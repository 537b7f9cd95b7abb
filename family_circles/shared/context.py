"""Request-scoped context: the viewer and the request id (contextvars).

The genealogy application authenticates users; when it serves this API it
attaches a Viewer to request.state.viewer. Requests without one are treated
as the configured default level (normally visitor).
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass

from family_circles.domain.enums import AccessLevel


@dataclass(frozen=True)
class Viewer:
    """Who is asking: optional user id and access level within the tree."""

    user_id: str | None = None
    access_level: AccessLevel = AccessLevel.VISITOR


_current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Bind the request id for log records emitted while handling this request."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    return _current_request_id.get()
