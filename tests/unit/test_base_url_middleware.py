"""BaseUrlMiddleware: public base URL replaces the request's scheme and host."""

from httpx import ASGITransport, AsyncClient
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from family_circles.middleware import BaseUrlMiddleware


async def _echo(request: Request) -> JSONResponse:
    return JSONResponse({"url": str(request.url), "base_url": request.state.base_url})


def _client(base_url: str) -> AsyncClient:
    app = Starlette(routes=[Route("/fc/demo/object/I1", _echo)])
    app.add_middleware(BaseUrlMiddleware, base_url=base_url)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://internal:8000")


async def test_configured_base_url_rewrites_request_url() -> None:
    async with _client("https://family.example.org/") as client:
        response = await client.get("/fc/demo/object/I1?x=1")
    assert response.json() == {
        "url": "https://family.example.org/fc/demo/object/I1?x=1",
        "base_url": "https://family.example.org",
    }


async def test_base_url_guessed_from_request() -> None:
    async with _client("") as client:
        response = await client.get("/fc/demo/object/I1")
    assert response.json() == {
        "url": "http://internal:8000/fc/demo/object/I1",
        "base_url": "http://internal:8000",
    }


async def test_configured_base_url_path_becomes_root_path() -> None:
    async with _client("https://family.example.org/webtrees/") as client:
        response = await client.get("/fc/demo/object/I1")
    assert response.status_code == 200
    assert response.json() == {
        "url": "https://family.example.org/webtrees/fc/demo/object/I1",
        "base_url": "https://family.example.org/webtrees",
    }


async def test_prefixed_path_from_proxy_is_kept() -> None:
    async with _client("https://family.example.org/webtrees") as client:
        response = await client.get("/webtrees/fc/demo/object/I1")
    assert response.status_code == 200
    assert response.json()["url"] == "https://family.example.org/webtrees/fc/demo/object/I1"
