# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest fixtures for database integration tests.

Provides an engine, a session and seeded reference rows. The database
defaults to in-memory SQLite; set TEST_DATABASE_URL to run against
PostgreSQL.
"""

import os
from types import SimpleNamespace
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.infrastructure.database.connection import enable_sqlite_foreign_keys
from src.infrastructure.database.models import Base, ClassInfo, School, UserInfo


@pytest.fixture(scope="session")
def db_url() -> str:
    """Get database URL for tests."""
    return os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture(scope="function")
async def db_engine(db_url: str):
    """Create async engine with a fresh schema and enforced foreign keys."""
    if db_url.startswith("sqlite"):
        engine = create_async_engine(db_url, echo=False, poolclass=StaticPool)
        enable_sqlite_foreign_keys(engine)
    else:
        engine = create_async_engine(db_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session for tests."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def seeded(db_session: AsyncSession) -> SimpleNamespace:
    """Insert one school, two classes, a leader and three students.

    Only primary keys are returned so tests never touch ORM instances
    that a rollback may have expired.
    """
    school = School(name="Xiamen University", province="Fujian", city="Xiamen")
    db_session.add(school)
    await db_session.flush()

    leader = UserInfo(name="Li Lei", number="24320000", type="student", school_id=school.id)
    students = [
        UserInfo(name="Han Meimei", number="24320001", type="student", school_id=school.id),
        UserInfo(name="Wei Hua", number="24320002", type="student", school_id=school.id),
        UserInfo(name="Zhang Wei", number="24320003", type="student"),
    ]
    class_a = ClassInfo(name="Software Engineering 1", site="Haiyun 3-201")
    class_b = ClassInfo(name="Software Engineering 2", site="Haiyun 3-305")
    db_session.add_all([leader, *students, class_a, class_b])
    await db_session.commit()

    return SimpleNamespace(
        school_id=school.id,
        leader_id=leader.id,
        student_ids=[s.id for s in students],
        class_a_id=class_a.id,
        class_b_id=class_b.id,
    )
