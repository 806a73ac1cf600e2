# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""School, user and class models.

These tables belong to the wider course management schema. The fixed
group domain only reads them (existence checks and display fields).
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.database.models.base import Base, IdType


class School(Base):
    """A school that users belong to."""

    __tablename__ = "school"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    province: Mapped[str | None] = mapped_column(String(50))
    city: Mapped[str | None] = mapped_column(String(50))

    def __repr__(self) -> str:
        return f"<School(id={self.id}, name={self.name!r})>"


class UserInfo(Base):
    """A student or teacher account."""

    __tablename__ = "user_info"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(50))
    number: Mapped[str | None] = mapped_column(String(50))
    email: Mapped[str | None] = mapped_column(String(100))
    phone: Mapped[str | None] = mapped_column(String(20))
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="student")
    school_id: Mapped[int | None] = mapped_column(IdType, ForeignKey("school.id"))

    school: Mapped[School | None] = relationship("School")

    def __repr__(self) -> str:
        return f"<UserInfo(id={self.id}, name={self.name!r}, type={self.type!r})>"


class ClassInfo(Base):
    """A class (teaching section) of a course."""

    __tablename__ = "class_info"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(50))
    site: Mapped[str | None] = mapped_column(String(100))
    class_time: Mapped[str | None] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"<ClassInfo(id={self.id}, name={self.name!r})>"
