"""Links back to the genealogy site's own pages for a projected record."""

import html
import re
from collections.abc import Sequence
from urllib.parse import parse_qsl, unquote, urlencode, urljoin, urlsplit, urlunsplit

# /fc/<tree>/object/<xref> (API route) -> /tree/<tree>/individual/<xref> (site page)
_OBJECT_ROUTE_RE = re.compile(r"/fc/([^/]+)/object/(.+)")
_IMG_SRC_RE = re.compile(r'src="([^"]+)"')


def _individual_route(match: re.Match[str]) -> str:
    return f"/tree/{match.group(1)}/individual/{match.group(2)}"


def strip_query(url: str) -> str:
    """Return url without its query string (and fragment)."""
    return url.split("?", 1)[0].split("#", 1)[0]


def individual_page_url(url: str, query_params: Sequence[tuple[str, str]]) -> str:
    """Return the site page URL for the individual requested by url.

    When the request was routed through a `route` query parameter
    ('index.php?route=/fc/<tree>/object/<xref>'), that parameter is rewritten
    and every other parameter is kept. Otherwise the request path itself is
    rewritten. Query parameters are re-appended in their original order.
    """
    page = strip_query(url)
    params = list(query_params)
    route_rewritten = False
    rewritten: list[tuple[str, str]] = []
    for key, value in params:
        if key == "route" and not route_rewritten:
            match = _OBJECT_ROUTE_RE.search(value)
            if match:
                value = _individual_route(match)
                route_rewritten = True
        rewritten.append((key, value))
    if not route_rewritten:
        page = _OBJECT_ROUTE_RE.sub(_individual_route, page, count=1)
    if rewritten:
        return f"{page}?{urlencode(rewritten)}"
    return page


def first_image_url(markup: str, base: str) -> str | None:
    """Return the first <img> src in markup, resolved against base.

    Markup is HTML-entity decoded first. The path of the src is URL-decoded;
    its query is re-encoded so that escaped delimiters in values (a file
    named 'a&b=c.jpg') stay escaped.
    Returns None when the markup has no src attribute.
    """
    if not markup:
        return None
    match = _IMG_SRC_RE.search(html.unescape(markup))
    if match is None:
        return None
    return urljoin(base, _decode_src(match.group(1)))


def _decode_src(src: str) -> str:
    parts = urlsplit(src)
    query = urlencode(parse_qsl(parts.query, keep_blank_values=True), safe="/")
    return urlunsplit(parts._replace(path=unquote(parts.path), query=query))
