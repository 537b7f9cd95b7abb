"""Base URL middleware.

Links in responses (individual pages, avatars) are built from the request
URL. Behind a proxy that URL is the internal one, so when a public base URL
is configured the scheme, host and port of the request are replaced by it,
and its path (e.g. '/webtrees') becomes the root_path the app is mounted at.
Either way the effective base URL is stored in request.state.base_url.
Raw ASGI.
"""

from typing import Callable
from urllib.parse import urlsplit

from family_circles.middleware._headers import get_header, replace_header

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _guess_base_url(scope: dict) -> str:
    """scheme://host[:port] + root_path, as seen by the server."""
    scheme = scope.get("scheme", "http")
    host = get_header(scope, "host")
    if host is None:
        server = scope.get("server") or ("localhost", None)
        host = server[0]
        if server[1] and server[1] != _DEFAULT_PORTS.get(scheme):
            host = f"{host}:{server[1]}"
    return f"{scheme}://{host}{scope.get('root_path', '')}".rstrip("/")


def _apply_path_prefix(scope: dict, prefix: str) -> None:
    """Mount the app under prefix: root_path is set and path carries the prefix.

    A proxy that already forwards the prefixed path is left as is.
    """
    scope["root_path"] = prefix
    path = scope.get("path", "")
    if path == prefix or path.startswith(prefix + "/"):
        return
    scope["path"] = prefix + path
    if "raw_path" in scope and scope["raw_path"] is not None:
        scope["raw_path"] = prefix.encode() + scope["raw_path"]


def BaseUrlMiddleware(app: Callable, base_url: str = "") -> Callable:
    """Rewrite scheme/host/port and path prefix from base_url (when set); record it in state."""
    configured = base_url.rstrip("/")
    parts = urlsplit(configured) if configured else None
    prefix = parts.path.rstrip("/") if parts is not None else ""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        if parts is not None:
            scheme = parts.scheme or "http"
            host = parts.hostname or "localhost"
            port = parts.port or _DEFAULT_PORTS.get(scheme, 80)
            netloc = host if parts.port is None else f"{host}:{parts.port}"
            scope = dict(scope)
            scope["scheme"] = scheme
            scope["server"] = (host, port)
            scope["headers"] = replace_header(list(scope.get("headers", [])), "host", netloc)
            if prefix:
                _apply_path_prefix(scope, prefix)
            effective = configured
        else:
            effective = _guess_base_url(scope)
        scope.setdefault("state", {})["base_url"] = effective
        await app(scope, receive, send)

    return asgi_app
