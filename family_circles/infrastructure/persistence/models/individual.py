"""Individual ORM model. i_gedcom holds the raw GEDCOM record."""

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from family_circles.infrastructure.persistence.database import Base
from family_circles.infrastructure.persistence.models._prefix import TABLE_PREFIX


class IndividualRow(Base):
    """Individual. Table: individuals. Primary key: (i_id, i_file)."""

    __tablename__ = f"{TABLE_PREFIX}individuals"

    i_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    i_file: Mapped[int] = mapped_column(Integer, primary_key=True)
    i_rin: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    i_sex: Mapped[str] = mapped_column(String(1), nullable=False, default="U")
    i_gedcom: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (Index(f"ix_{TABLE_PREFIX}individuals_file_id", "i_file", "i_id"),)
