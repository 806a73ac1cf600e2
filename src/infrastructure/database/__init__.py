# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Database infrastructure for the relational store.

This package provides the SQLAlchemy async connection and the ORM models
for classes, users, schools and fixed groups.

Example:
    from src.infrastructure.database import init_database, get_session

    await init_database(settings)
    async with get_session() as session:
        result = await session.execute(select(FixGroup))
"""

from src.infrastructure.database.connection import (
    DatabaseError,
    check_database_connection,
    close_database,
    enable_sqlite_foreign_keys,
    get_engine,
    get_session,
    get_sessionmaker,
    init_database,
)

__all__ = [
    "DatabaseError",
    "check_database_connection",
    "close_database",
    "enable_sqlite_foreign_keys",
    "get_engine",
    "get_session",
    "get_sessionmaker",
    "init_database",
]
