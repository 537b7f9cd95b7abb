"""Family ORM model. Spouse xrefs are denormalized into f_husb / f_wife."""

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from family_circles.infrastructure.persistence.database import Base
from family_circles.infrastructure.persistence.models._prefix import TABLE_PREFIX


class FamilyRow(Base):
    """Family. Table: families. Primary key: (f_id, f_file)."""

    __tablename__ = f"{TABLE_PREFIX}families"

    f_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    f_file: Mapped[int] = mapped_column(Integer, primary_key=True)
    f_husb: Mapped[str | None] = mapped_column(String(20), nullable=True)
    f_wife: Mapped[str | None] = mapped_column(String(20), nullable=True)
    f_gedcom: Mapped[str] = mapped_column(Text, nullable=False, default="")
    f_numchil: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index(f"ix_{TABLE_PREFIX}families_husb", "f_husb", "f_file"),
        Index(f"ix_{TABLE_PREFIX}families_wife", "f_wife", "f_file"),
    )
