"""Fixed group backend.

Management of fixed groups (persistent student teams within a class) for
the course management platform: group CRUD, memberships and cascading
removal from class to group to member.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
