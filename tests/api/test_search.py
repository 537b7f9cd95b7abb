"""GET /fc/{tree}/search: term extraction, ordering, merging and visibility."""

import pytest
from httpx import AsyncClient

from family_circles.core.config import get_settings
from family_circles.core.limiter import limiter


async def test_search_individuals_then_families(client: AsyncClient) -> None:
    """Individuals first (living Alice hidden), then the matching family."""
    response = await client.get("/fc/demo/search", params={"search": "Smith"})
    assert response.status_code == 200
    assert response.json() == [
        {"id": "I1", "text": "John Smith"},
        {"id": "I2", "text": "Jane Jones/Smith"},
        {"id": "I3", "text": "Tom Smith"},
        {"id": "F1", "text": "Smith John/Jane"},
    ]
    assert response.headers["access-control-allow-origin"] == "*"


async def test_search_is_case_insensitive(client: AsyncClient) -> None:
    upper = await client.get("/fc/demo/search", params={"search": "SMITH"})
    lower = await client.get("/fc/demo/search", params={"search": "smith"})
    assert upper.json() == lower.json()
    assert len(upper.json()) == 4


async def test_search_families_are_deduplicated(client: AsyncClient) -> None:
    """Families matching by member and by couple name are listed once."""
    response = await client.get("/fc/demo/search", params={"search": "Jones"})
    ids = [item["id"] for item in response.json()]
    assert ids == ["I2", "I6", "F1", "F2", "F3"]


async def test_search_quoted_phrase(client: AsyncClient) -> None:
    response = await client.get("/fc/demo/search", params={"search": '"Jane Jones"'})
    assert [item["id"] for item in response.json()] == ["I2", "F1"]


async def test_search_phrase_spanning_both_spouses(client: AsyncClient) -> None:
    """Only the 'husband wife' name string contains this phrase."""
    response = await client.get("/fc/demo/search", params={"search": '"Smith Jane"'})
    assert response.json() == [{"id": "F1", "text": "Smith John/Jane"}]


async def test_search_member_sees_living(client: AsyncClient, as_member) -> None:
    response = await client.get("/fc/demo/search", params={"search": "Alice"})
    assert response.json() == [{"id": "I4", "text": "Alice Smith"}]


async def test_search_hides_private_individual(client: AsyncClient) -> None:
    response = await client.get("/fc/demo/search", params={"search": "Brown"})
    assert response.status_code == 200
    assert response.json() == []


async def test_search_wildcards_are_literal(client: AsyncClient) -> None:
    response = await client.get("/fc/demo/search", params={"search": "%"})
    assert response.status_code == 200
    assert response.json() == []


async def test_search_without_terms(client: AsyncClient) -> None:
    for params in ({}, {"search": ""}, {"search": "   "}):
        response = await client.get("/fc/demo/search", params=params)
        assert response.status_code == 400
        assert response.json() == {"code": 400, "error": "must specify search term"}
        assert response.headers["access-control-allow-origin"] == "*"


async def test_search_unknown_tree(client: AsyncClient) -> None:
    response = await client.get("/fc/nope/search", params={"search": "Smith"})
    assert response.status_code == 404


async def test_search_terms_checked_before_tree(client: AsyncClient) -> None:
    response = await client.get("/fc/nope/search", params={"search": ""})
    assert response.status_code == 400
    assert response.json() == {"code": 400, "error": "must specify search term"}


async def test_search_long_query_is_accepted(client: AsyncClient) -> None:
    response = await client.get("/fc/demo/search", params={"search": "Smith " + "x" * 600})
    assert response.status_code == 200
    assert [item["id"] for item in response.json()][:3] == ["I1", "I2", "I3"]


@pytest.fixture
def low_search_limit(monkeypatch):
    """Two searches per minute for the duration of the test."""
    monkeypatch.setenv("SEARCH_RATE_LIMIT", "2/minute")
    get_settings.cache_clear()
    limiter.reset()
    yield
    get_settings.cache_clear()
    limiter.reset()


async def test_search_rate_limited(client: AsyncClient, low_search_limit) -> None:
    statuses = []
    for _ in range(3):
        response = await client.get("/fc/demo/search", params={"search": "Smith"})
        statuses.append(response.status_code)
    assert statuses == [200, 200, 429]
    body = response.json()
    assert body["code"] == 429
    assert "2 per 1 minute" in body["error"]
    assert response.headers["access-control-allow-origin"] == "*"
