# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Fixed group request and response models."""

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class SchoolSummary(BaseModel):
    """School reference shown next to a user."""

    id: int
    name: str


class UserSummary(BaseModel):
    """Student or leader as returned by fixed group queries."""

    id: int
    name: str | None = None
    number: str | None = None
    type: str
    school: SchoolSummary | None = None


class ClassSummary(BaseModel):
    """Class reference shown on a fixed group."""

    id: int
    name: str | None = None


class FixGroupResponse(BaseModel):
    """Fixed group with its class and leader."""

    id: int
    class_info: ClassSummary
    leader: UserSummary


class FixGroupMemberResponse(BaseModel):
    """Raw membership record."""

    id: int
    fix_group_id: int
    student_id: int


class FixGroupUpdateRequest(BaseModel):
    """Replacement class and leader for a fixed group.

    Members are not touched by an update.
    """

    model_config = ConfigDict(extra="forbid")

    class_id: PositiveInt = Field(..., description="Class the group moves to")
    leader_id: PositiveInt = Field(..., description="New group leader")
