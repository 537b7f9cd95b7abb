"""Tree repository. Resolves a tree (and its preferences) by URL name."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from family_circles.domain.entities import Tree
from family_circles.infrastructure.persistence.models import TreeRow, TreeSettingRow

# Preferences read from gedcom_setting.
_TITLE = "title"
_HIDE_LIVE_PEOPLE = "HIDE_LIVE_PEOPLE"


class TreeRepository:
    """Read-only access to trees."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_name(self, name: str) -> Tree | None:
        """Return the tree whose gedcom_name is name, or None."""
        row = (
            await self.db.execute(select(TreeRow).where(TreeRow.gedcom_name == name))
        ).scalar_one_or_none()
        if row is None:
            return None
        settings_rows = (
            await self.db.execute(
                select(TreeSettingRow).where(
                    TreeSettingRow.gedcom_id == row.gedcom_id,
                    TreeSettingRow.setting_name.in_((_TITLE, _HIDE_LIVE_PEOPLE)),
                )
            )
        ).scalars().all()
        prefs = {s.setting_name: s.setting_value for s in settings_rows}
        return Tree(
            id=row.gedcom_id,
            name=row.gedcom_name,
            title=prefs.get(_TITLE) or row.gedcom_name,
            hide_living=prefs.get(_HIDE_LIVE_PEOPLE, "1") != "0",
        )
