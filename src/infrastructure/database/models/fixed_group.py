# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Fixed group models.

A FixGroup is a persistent student team inside one class, with one leader.
FixGroupMember rows link a group to its students. There is deliberately no
unique constraint on (fix_group_id, student_id).

Only many-to-one relationships are mapped so that deleting a row never
triggers collection loads; child rows are removed with bulk statements
before their parent.
"""

from __future__ import annotations

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.database.models.base import Base, IdType
from src.infrastructure.database.models.school import ClassInfo, UserInfo


class FixGroup(Base):
    """A fixed group within a class."""

    __tablename__ = "fix_group"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    class_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("class_info.id"), nullable=False, index=True
    )
    leader_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("user_info.id"), nullable=False
    )

    class_info: Mapped[ClassInfo] = relationship("ClassInfo")
    leader: Mapped[UserInfo] = relationship("UserInfo")

    def __repr__(self) -> str:
        return f"<FixGroup(id={self.id}, class_id={self.class_id}, leader_id={self.leader_id})>"


class FixGroupMember(Base):
    """Membership of a student in a fixed group."""

    __tablename__ = "fix_group_member"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    fix_group_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("fix_group.id"), nullable=False, index=True
    )
    student_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("user_info.id"), nullable=False, index=True
    )

    fix_group: Mapped[FixGroup] = relationship("FixGroup")
    student: Mapped[UserInfo] = relationship("UserInfo")

    def __repr__(self) -> str:
        return (
            f"<FixGroupMember(id={self.id}, fix_group_id={self.fix_group_id}, "
            f"student_id={self.student_id})>"
        )
