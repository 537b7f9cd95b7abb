"""Tree ORM models. One row per imported GEDCOM file plus its settings."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from family_circles.infrastructure.persistence.database import Base
from family_circles.infrastructure.persistence.models._prefix import TABLE_PREFIX


class TreeRow(Base):
    """Tree. Table: gedcom. gedcom_name is the URL name of the tree."""

    __tablename__ = f"{TABLE_PREFIX}gedcom"

    gedcom_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    gedcom_name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class TreeSettingRow(Base):
    """Per-tree preference (e.g. title, HIDE_LIVE_PEOPLE). Table: gedcom_setting."""

    __tablename__ = f"{TABLE_PREFIX}gedcom_setting"

    gedcom_id: Mapped[int] = mapped_column(
        Integer, ForeignKey(f"{TABLE_PREFIX}gedcom.gedcom_id"), primary_key=True
    )
    setting_name: Mapped[str] = mapped_column(String(32), primary_key=True)
    setting_value: Mapped[str] = mapped_column(String(255), nullable=False, default="")
