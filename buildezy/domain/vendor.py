"""SQLAlchemy ORM model for Vendors.

Pattern shared by every domain model:
  - Inherit Base, TimestampMixin
  - Integer autoincrement primary key (ids are never reused, SQLite included)
  - created_at from TimestampMixin, written once at insert
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from buildezy.db.base import Base
from buildezy.domain.mixins import TimestampMixin


class Vendor(Base, TimestampMixin):
    __tablename__ = "vendors"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    mobile: Mapped[str] = mapped_column(String(50), nullable=False)
    service: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, default="", server_default=""
    )
