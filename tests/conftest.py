"""Pytest configuration and fixtures for family-circles.

Uses family_circles.main:app for HTTP tests. The database is an in-memory
SQLite file seeded with a small tree; get_db is overridden so requests and
repository tests share it.
"""

import os

# Settings are read when the app module is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SEARCH_RATE_LIMIT", "1000/minute")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from family_circles.api.fc.dependencies import get_viewer
from family_circles.domain.entities import Tree
from family_circles.domain.enums import AccessLevel
from family_circles.infrastructure.persistence.database import Base, get_db
from family_circles.infrastructure.persistence.models import (
    FamilyRow,
    IndividualRow,
    MediaFileRow,
    NameRow,
    TreeRow,
    TreeSettingRow,
)
from family_circles.main import app
from family_circles.shared.context import Viewer

DEMO_TREE_ID = 1


def _individual(xref: str, sex: str, *lines: str) -> IndividualRow:
    gedcom = "\n".join([f"0 @{xref}@ INDI", f"1 SEX {sex}", *lines])
    return IndividualRow(i_id=xref, i_file=DEMO_TREE_ID, i_sex=sex, i_gedcom=gedcom)


def _name(
    xref: str, num: int, givn: str, surname: str, n_type: str = "NAME"
) -> NameRow:
    return NameRow(
        n_id=xref,
        n_file=DEMO_TREE_ID,
        n_num=num,
        n_type=n_type,
        n_full=f"{givn} {surname}".strip(),
        n_givn=givn,
        n_surname=surname,
        n_surn=surname.upper(),
    )


def _family(xref: str, husb: str | None, wife: str | None, *children: str) -> FamilyRow:
    lines = [f"0 @{xref}@ FAM"]
    if husb:
        lines.append(f"1 HUSB @{husb}@")
    if wife:
        lines.append(f"1 WIFE @{wife}@")
    lines.extend(f"1 CHIL @{c}@" for c in children)
    return FamilyRow(
        f_id=xref,
        f_file=DEMO_TREE_ID,
        f_husb=husb,
        f_wife=wife,
        f_gedcom="\n".join(lines),
        f_numchil=len(children),
    )


def demo_rows() -> list:
    """Tree 'demo' (living people hidden from visitors).

    F1: John Smith + Jane Jones (married name Smith); children Tom (dead) and
        Alice (living).
    F2: Mary Jones, no husband, no children.
    F3: husband pointer to a missing individual.
    I5: Bob Brown, RESN privacy.
    """
    return [
        TreeRow(gedcom_id=DEMO_TREE_ID, gedcom_name="demo", sort_order=1),
        TreeSettingRow(gedcom_id=DEMO_TREE_ID, setting_name="title", setting_value="Demo Tree"),
        TreeSettingRow(gedcom_id=DEMO_TREE_ID, setting_name="HIDE_LIVE_PEOPLE", setting_value="1"),
        _individual("I1", "M", "1 DEAT Y", "1 FAMS @F1@", "1 OBJE @M1@"),
        _individual("I2", "F", "1 DEAT Y", "1 FAMS @F1@"),
        _individual("I3", "M", "1 BURI Y", "1 FAMC @F1@"),
        _individual("I4", "F", "1 FAMC @F1@"),
        _individual("I5", "M", "1 RESN privacy", "1 DEAT Y"),
        _individual("I6", "F", "1 DEAT Y", "1 FAMS @F2@"),
        _name("I1", 0, "John", "Smith"),
        _name("I2", 0, "Jane", "Jones"),
        _name("I2", 1, "Jane", "Smith", n_type="_MARNM"),
        _name("I3", 0, "Tom", "Smith"),
        _name("I4", 0, "Alice", "Smith"),
        _name("I5", 0, "Bob", "Brown"),
        _name("I6", 0, "Mary", "Jones"),
        _family("F1", "I1", "I2", "I3", "I4"),
        _family("F2", None, "I6"),
        _family("F3", "I99", "I6"),
        MediaFileRow(m_id="M1", m_file=DEMO_TREE_ID, multimedia_file_refn="photos/john.jpg"),
        MediaFileRow(m_id="M1", m_file=DEMO_TREE_ID, multimedia_file_refn="photos/john-2.jpg"),
    ]


@pytest.fixture
def demo_tree() -> Tree:
    return Tree(id=DEMO_TREE_ID, name="demo", title="Demo Tree", hide_living=True)


@pytest.fixture
async def session_factory() -> async_sessionmaker[AsyncSession]:
    """Seeded in-memory database; one connection shared by every session."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        session.add_all(demo_rows())
        await session.commit()
    yield factory
    await engine.dispose()


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Database session for repository/integration tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), backed by the demo database."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def as_member() -> None:
    """Requests are made by a member of the tree (sees living people and private records)."""
    app.dependency_overrides[get_viewer] = lambda: Viewer(
        user_id="u1", access_level=AccessLevel.MEMBER
    )
