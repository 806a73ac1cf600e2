# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Fixed group domain package.

This package provides fixed group management functionality including:
- Fixed group creation, update and deletion
- Membership management
- Cascading removal of a class's groups
"""

from src.domains.fixed_group.service import (
    ClassNotFoundError,
    FixedGroupService,
    FixedGroupServiceError,
    FixGroupNotFoundError,
    InvalidArgumentError,
    UserNotFoundError,
)

__all__ = [
    "FixedGroupService",
    "FixedGroupServiceError",
    "InvalidArgumentError",
    "ClassNotFoundError",
    "UserNotFoundError",
    "FixGroupNotFoundError",
]
