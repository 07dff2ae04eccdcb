"""SQLAlchemy ORM model for customer enquiries."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from buildezy.db.base import Base
from buildezy.domain.mixins import TimestampMixin


class Enquiry(Base, TimestampMixin):
    __tablename__ = "enquiries"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    mobile: Mapped[str] = mapped_column(String(50), nullable=False)
    message: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, default="", server_default=""
    )
