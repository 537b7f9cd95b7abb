"""Name index ORM model: one row per name record of an individual."""

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from family_circles.infrastructure.persistence.database import Base
from family_circles.infrastructure.persistence.models._prefix import TABLE_PREFIX


class NameRow(Base):
    """Name record. Table: name. n_num is the record order within the individual.

    n_type is 'NAME' for primary names, '_MARNM' for married names, etc.
    """

    __tablename__ = f"{TABLE_PREFIX}name"

    n_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    n_file: Mapped[int] = mapped_column(Integer, primary_key=True)
    n_num: Mapped[int] = mapped_column(Integer, primary_key=True)
    n_type: Mapped[str] = mapped_column(String(15), nullable=False, default="NAME")
    n_sort: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    n_full: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    n_surname: Mapped[str | None] = mapped_column(String(255), nullable=True)
    n_surn: Mapped[str | None] = mapped_column(String(255), nullable=True)
    n_givn: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index(f"ix_{TABLE_PREFIX}name_full", "n_full", "n_file"),
        Index(f"ix_{TABLE_PREFIX}name_surn", "n_surn", "n_file"),
    )
