"""ASGI header helpers. Headers are lists of (bytes, bytes)."""


def get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def replace_header(headers: list, name: str, value: str) -> list:
    """Return headers with every `name` entry replaced by a single one."""
    want = name.lower().encode()
    kept = [(k, v) for k, v in headers if k.lower() != want]
    kept.append((want, value.encode()))
    return kept
