# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pydantic request/response models."""

from src.models.fixed_group import (
    ClassSummary,
    FixGroupMemberResponse,
    FixGroupResponse,
    FixGroupUpdateRequest,
    SchoolSummary,
    UserSummary,
)

__all__ = [
    "ClassSummary",
    "FixGroupMemberResponse",
    "FixGroupResponse",
    "FixGroupUpdateRequest",
    "SchoolSummary",
    "UserSummary",
]
