# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""ORM models for the relational store."""

from src.infrastructure.database.models.base import Base
from src.infrastructure.database.models.fixed_group import FixGroup, FixGroupMember
from src.infrastructure.database.models.school import ClassInfo, School, UserInfo

__all__ = [
    "Base",
    "School",
    "UserInfo",
    "ClassInfo",
    "FixGroup",
    "FixGroupMember",
]
