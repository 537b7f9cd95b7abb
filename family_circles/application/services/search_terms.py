"""Search term extraction from a free-text query.

Quoted phrases stay together; every Han (CJK ideograph) character is a term
of its own; everything else is split on whitespace.
"""

import re

_QUOTED_RE = re.compile(r'"([^"]+)"')

# Characters of the Unicode "Han" script (Scripts.txt), as one class.
_HAN_RANGES = (
    "\u2e80-\u2e99"
    "\u2e9b-\u2ef3"
    "\u2f00-\u2fd5"
    "\u3005"
    "\u3007"
    "\u3021-\u3029"
    "\u3038-\u303b"
    "\u3400-\u4dbf"
    "\u4e00-\u9fff"
    "\uf900-\ufa6d"
    "\ufa70-\ufad9"
    "\U00016fe2-\U00016fe3"
    "\U00016ff0-\U00016ff1"
    "\U00020000-\U0002a6df"
    "\U0002a700-\U0002ebe0"
    "\U0002ebf0-\U0002ee5d"
    "\U0002f800-\U0002fa1d"
    "\U00030000-\U0003134a"
    "\U00031350-\U000323af"
)
_HAN_RE = re.compile(f"[{_HAN_RANGES}]")


def extract_search_terms(query: str) -> list[str]:
    """Return search terms in extraction order.

    1. Each "quoted phrase" becomes one term (trimmed); every occurrence of
       that quoted phrase is removed from the query.
    2. A space is inserted after every Han character, so '北京' gives '北', '京'.
    3. Remaining whitespace-separated words are appended; a repeated word is
       only taken once.

    Empty terms are never returned.
    """
    terms: list[str] = []

    while (match := _QUOTED_RE.search(query)) is not None:
        phrase = match.group(1).strip()
        if phrase:
            terms.append(phrase)
        query = query.replace(match.group(0), "")

    query = _HAN_RE.sub(r"\g<0> ", query)

    # dict preserves first-seen order
    terms.extend(dict.fromkeys(query.split()))
    return terms
