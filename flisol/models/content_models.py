from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from flisol.db.base import Base


# Read-only mappings of the content store. The schema is owned by the CMS;
# only the columns this service reads (plus their keys) are declared.


class NodeFieldData(Base):
    __tablename__ = "node_field_data"

    nid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    langcode: Mapped[str] = mapped_column(String(12), primary_key=True, default="en")
    type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class NodeFieldImage(Base):
    __tablename__ = "node__field_image"

    entity_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    deleted: Mapped[bool] = mapped_column(Boolean, primary_key=True, default=False)
    delta: Mapped[int] = mapped_column(Integer, primary_key=True, default=0)
    langcode: Mapped[str] = mapped_column(String(32), primary_key=True, default="en")
    bundle: Mapped[str] = mapped_column(String(128), nullable=False, default="article")
    field_image_target_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    field_image_alt: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)


class FileManaged(Base):
    __tablename__ = "file_managed"

    fid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    filename: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    uri: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    filemime: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
