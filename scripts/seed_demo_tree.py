"""Seed a demo genealogy tree from scripts/demo-tree.json.

Creates the genealogy tables when missing (development databases only; a real
deployment reads the tables of the genealogy application) and inserts trees,
individuals, names, families and media files. Trees that already exist (by
name) are skipped.

Usage:
    python -m scripts.seed_demo_tree [path/to/demo-tree.json]

Requires: DATABASE_URL (e.g. sqlite+aiosqlite:///./family_circles.db).
"""

from __future__ import annotations

import asyncio
import json
import sys
from collections import defaultdict
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from family_circles.core.config import get_settings
from family_circles.infrastructure.persistence import database
from family_circles.infrastructure.persistence.models import (
    FamilyRow,
    IndividualRow,
    MediaFileRow,
    NameRow,
    TreeRow,
    TreeSettingRow,
)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _family_links(families: list[dict[str, Any]]) -> dict[str, list[str]]:
    """Return {individual xref: ['1 FAMS @F1@', '1 FAMC @F2@', ...]} in family order."""
    links: dict[str, list[str]] = defaultdict(list)
    for fam in families:
        for spouse in (fam.get("husband"), fam.get("wife")):
            if spouse:
                links[spouse].append(f"1 FAMS @{fam['xref']}@")
        for child in fam.get("children", []):
            links[child].append(f"1 FAMC @{fam['xref']}@")
    return links


def _individual_rows(tree_id: int, person: dict[str, Any], links: list[str]) -> list[Any]:
    xref = person["xref"]
    sex = person.get("sex", "U")
    lines = [f"0 @{xref}@ INDI"]
    for name in person["names"]:
        lines.append(f"1 NAME {name.get('givn', '')} /{name.get('surname', '')}/")
    lines.append(f"1 SEX {sex}")
    lines.extend(person.get("facts", []))
    lines.extend(links)

    rows: list[Any] = [
        IndividualRow(i_id=xref, i_file=tree_id, i_sex=sex, i_gedcom="\n".join(lines))
    ]
    for num, name in enumerate(person["names"]):
        givn = name.get("givn", "")
        surname = name.get("surname", "")
        rows.append(
            NameRow(
                n_id=xref,
                n_file=tree_id,
                n_num=num,
                n_type=name.get("type", "NAME"),
                n_sort=f"{surname},{givn}",
                n_full=f"{givn} {surname}".strip(),
                n_givn=givn,
                n_surname=surname,
                n_surn=surname.upper(),
            )
        )
    return rows


def _family_row(tree_id: int, fam: dict[str, Any]) -> FamilyRow:
    children = fam.get("children", [])
    lines = [f"0 @{fam['xref']}@ FAM"]
    if fam.get("husband"):
        lines.append(f"1 HUSB @{fam['husband']}@")
    if fam.get("wife"):
        lines.append(f"1 WIFE @{fam['wife']}@")
    lines.extend(f"1 CHIL @{c}@" for c in children)
    return FamilyRow(
        f_id=fam["xref"],
        f_file=tree_id,
        f_husb=fam.get("husband"),
        f_wife=fam.get("wife"),
        f_gedcom="\n".join(lines),
        f_numchil=len(children),
    )


async def _seed_tree(session: AsyncSession, tree: dict[str, Any]) -> None:
    existing = (
        await session.execute(select(TreeRow).where(TreeRow.gedcom_name == tree["name"]))
    ).scalar_one_or_none()
    if existing is not None:
        print(f"  Skip tree {tree['name']}: already exists")
        return

    tree_id = tree["id"]
    session.add(TreeRow(gedcom_id=tree_id, gedcom_name=tree["name"]))
    session.add_all(
        [
            TreeSettingRow(gedcom_id=tree_id, setting_name="title", setting_value=tree["title"]),
            TreeSettingRow(
                gedcom_id=tree_id,
                setting_name="HIDE_LIVE_PEOPLE",
                setting_value="1" if tree.get("hide_living", True) else "0",
            ),
        ]
    )

    families = tree.get("families", [])
    links = _family_links(families)
    for person in tree.get("individuals", []):
        session.add_all(_individual_rows(tree_id, person, links.get(person["xref"], [])))
        print(f"  Individual {person['xref']}")
    for fam in families:
        session.add(_family_row(tree_id, fam))
        print(f"  Family {fam['xref']}")
    for media in tree.get("media", []):
        session.add(
            MediaFileRow(
                m_id=media["xref"],
                m_file=tree_id,
                multimedia_file_refn=media["file"],
                multimedia_format=media.get("format", ""),
                descriptive_title=media.get("title", ""),
            )
        )
    print(f"Tree {tree['name']} seeded")


async def run(path: Path) -> None:
    _load_env()
    get_settings.cache_clear()
    session_factory = database._ensure_engine()
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)

    data = json.loads(path.read_text(encoding="utf-8"))
    async with session_factory() as session:
        for tree in data.get("trees", []):
            await _seed_tree(session, tree)
        await session.commit()
    await database.dispose_engine()
    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "demo-tree.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
