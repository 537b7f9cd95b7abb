"""Media file ORM model. A media object (m_id) may have several files."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from family_circles.infrastructure.persistence.database import Base
from family_circles.infrastructure.persistence.models._prefix import TABLE_PREFIX


class MediaFileRow(Base):
    """Media file. Table: media_file. Lowest id is the object's primary file."""

    __tablename__ = f"{TABLE_PREFIX}media_file"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    m_id: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    m_file: Mapped[int] = mapped_column(Integer, nullable=False)
    multimedia_file_refn: Mapped[str] = mapped_column(String(248), nullable=False, default="")
    multimedia_format: Mapped[str] = mapped_column(String(4), nullable=False, default="")
    source_media_type: Mapped[str] = mapped_column(String(15), nullable=False, default="")
    descriptive_title: Mapped[str] = mapped_column(String(248), nullable=False, default="")
