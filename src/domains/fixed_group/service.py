# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Fixed group service for managing persistent student teams in a class.

This module provides the FixedGroupService class for:
- Fixed group CRUD operations
- Membership management (add, remove, list)
- Cascading deletes from class to group to member
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.infrastructure.database.models.fixed_group import FixGroup, FixGroupMember
from src.infrastructure.database.models.school import ClassInfo, UserInfo
from src.models.fixed_group import (
    ClassSummary,
    FixGroupMemberResponse,
    FixGroupResponse,
    FixGroupUpdateRequest,
    SchoolSummary,
    UserSummary,
)

logger = logging.getLogger(__name__)


class FixedGroupServiceError(Exception):
    """Base exception for fixed group service errors."""

    pass


class InvalidArgumentError(FixedGroupServiceError, ValueError):
    """Raised when an identifier is not a positive integer."""

    pass


class ClassNotFoundError(FixedGroupServiceError):
    """Raised when class is not found."""

    pass


class UserNotFoundError(FixedGroupServiceError):
    """Raised when user is not found."""

    pass


class FixGroupNotFoundError(FixedGroupServiceError):
    """Raised when fixed group is not found."""

    pass


def _validate_id(name: str, value: object) -> None:
    """Reject identifiers that are not positive integers.

    Raises:
        InvalidArgumentError: If value is not an int greater than zero.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")


class FixedGroupService:
    """Service for managing fixed groups and their members.

    Every public method validates its identifiers before touching the
    store, loads referenced rows by primary key, then runs one query or
    one unit of work. The session is owned by the caller.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        """Initialize fixed group service.

        Args:
            db: Async database session, owned by the caller.
        """
        self.db = db

    async def create_fix_group(self, class_id: int, leader_id: int) -> int:
        """Create a fixed group in a class.

        Args:
            class_id: Class the group belongs to.
            leader_id: User leading the group.

        Returns:
            ID of the new group.

        Raises:
            InvalidArgumentError: If an id is not positive.
            ClassNotFoundError: If class not found.
            UserNotFoundError: If leader not found.
        """
        _validate_id("class_id", class_id)
        _validate_id("leader_id", leader_id)

        class_ = await self._get_class(class_id)
        leader = await self._get_user(leader_id)

        group = FixGroup(class_id=class_.id, leader_id=leader.id)
        self.db.add(group)
        await self._commit()
        await self.db.refresh(group)

        logger.info(
            "Created fix group: %s (class=%s, leader=%s)", group.id, class_id, leader_id
        )

        return group.id

    async def delete_group_members(self, fix_group_id: int) -> None:
        """Remove every member of a fixed group.

        The group itself is kept. A missing group is not an error; zero
        rows are removed.

        Args:
            fix_group_id: Fixed group identifier.

        Raises:
            InvalidArgumentError: If the id is not positive.
        """
        _validate_id("fix_group_id", fix_group_id)

        try:
            result = await self.db.execute(
                delete(FixGroupMember).where(FixGroupMember.fix_group_id == fix_group_id)
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "Removed members of fix group: group=%s, removed=%s",
            fix_group_id,
            result.rowcount,
        )

    async def add_member(self, user_id: int, group_id: int) -> int:
        """Add a user to a fixed group.

        Args:
            user_id: User to add.
            group_id: Target fixed group.

        Returns:
            ID of the new membership record.

        Raises:
            InvalidArgumentError: If an id is not positive.
            FixGroupNotFoundError: If group not found.
            UserNotFoundError: If user not found.
        """
        _validate_id("user_id", user_id)
        _validate_id("group_id", group_id)

        group = await self._get_group(group_id)
        user = await self._get_user(user_id)

        return await self._insert_member(group, user)

    async def list_members(self, group_id: int) -> list[UserSummary]:
        """List the students of a fixed group.

        A student added twice appears twice.

        Args:
            group_id: Fixed group identifier.

        Returns:
            Students with their school, in membership order.

        Raises:
            InvalidArgumentError: If the id is not positive.
            FixGroupNotFoundError: If group not found.
        """
        _validate_id("group_id", group_id)

        await self._get_group(group_id)

        query = (
            select(FixGroupMember)
            .options(selectinload(FixGroupMember.student).selectinload(UserInfo.school))
            .where(FixGroupMember.fix_group_id == group_id)
            .order_by(FixGroupMember.id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        members = result.scalars().all()

        return [self._to_user_summary(m.student) for m in members]

    async def list_groups_by_class(self, class_id: int) -> list[FixGroupResponse]:
        """List the fixed groups of a class.

        Args:
            class_id: Class identifier.

        Returns:
            Groups with class and leader details.

        Raises:
            InvalidArgumentError: If the id is not positive.
            ClassNotFoundError: If class not found.
        """
        _validate_id("class_id", class_id)

        await self._get_class(class_id)

        query = (
            select(FixGroup)
            .options(
                selectinload(FixGroup.class_info),
                selectinload(FixGroup.leader).selectinload(UserInfo.school),
            )
            .where(FixGroup.class_id == class_id)
            .order_by(FixGroup.id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        groups = result.scalars().all()

        return [self._to_response(g) for g in groups]

    async def delete_groups_by_class(self, class_id: int) -> None:
        """Delete every fixed group of a class together with its members.

        Memberships are removed before groups, and both removals are
        committed as a single unit of work.

        Args:
            class_id: Class identifier.

        Raises:
            InvalidArgumentError: If the id is not positive.
            ClassNotFoundError: If class not found.
        """
        _validate_id("class_id", class_id)

        await self._get_class(class_id)

        group_ids = select(FixGroup.id).where(FixGroup.class_id == class_id)

        try:
            members = await self.db.execute(
                delete(FixGroupMember).where(FixGroupMember.fix_group_id.in_(group_ids))
            )
            groups = await self.db.execute(
                delete(FixGroup).where(FixGroup.class_id == class_id)
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "Deleted fix groups of class: class=%s, groups=%s, members=%s",
            class_id,
            groups.rowcount,
            members.rowcount,
        )

    async def delete_group(self, group_id: int) -> None:
        """Delete a fixed group and all of its members.

        Args:
            group_id: Fixed group identifier.

        Raises:
            InvalidArgumentError: If the id is not positive.
            FixGroupNotFoundError: If group not found. Nothing is removed.
        """
        _validate_id("group_id", group_id)

        try:
            await self.db.execute(
                delete(FixGroupMember).where(FixGroupMember.fix_group_id == group_id)
            )
            group = await self._get_group(group_id)
            await self.db.delete(group)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info("Deleted fix group: %s", group_id)

    async def update_group(self, group_id: int, request: FixGroupUpdateRequest) -> None:
        """Replace the class and leader of a fixed group.

        Members are left untouched. The new class and leader are not
        looked up; the store's foreign keys reject unknown ids on commit.

        Args:
            group_id: Fixed group identifier.
            request: New class and leader.

        Raises:
            InvalidArgumentError: If the id is not positive.
            FixGroupNotFoundError: If group not found.
        """
        _validate_id("group_id", group_id)

        group = await self._get_group(group_id)
        group.class_id = request.class_id
        group.leader_id = request.leader_id

        await self._commit()

        logger.info(
            "Updated fix group: %s (class=%s, leader=%s)",
            group_id,
            request.class_id,
            request.leader_id,
        )

    async def add_student_to_group(self, user_id: int, group_id: int) -> int:
        """Add a student to a fixed group.

        Students already in the group are not rejected: calling this twice
        creates two membership rows.

        Args:
            user_id: Student to add.
            group_id: Target fixed group.

        Returns:
            ID of the new membership record.

        Raises:
            InvalidArgumentError: If an id is not positive.
            FixGroupNotFoundError: If group not found.
            UserNotFoundError: If student not found.
        """
        _validate_id("user_id", user_id)
        _validate_id("group_id", group_id)

        group = await self._get_group(group_id)
        student = await self._get_user(user_id)

        # TODO: reject duplicates once the expected error for "already a member" is agreed
        return await self._insert_member(group, student)

    async def get_group_for_student_in_class(
        self,
        user_id: int,
        class_id: int,
    ) -> FixGroupResponse | None:
        """Get the fixed group a student belongs to within a class.

        Args:
            user_id: Student identifier.
            class_id: Class identifier.

        Returns:
            The group, or None if the student is in no group of the class.

        Raises:
            InvalidArgumentError: If an id is not positive.
            UserNotFoundError: If user not found.
            ClassNotFoundError: If class not found.
            sqlalchemy.exc.MultipleResultsFound: If the student has more than
                one membership in the class.
        """
        _validate_id("user_id", user_id)
        _validate_id("class_id", class_id)

        await self._get_user(user_id)
        await self._get_class(class_id)

        query = (
            select(FixGroupMember)
            .join(FixGroupMember.fix_group)
            .options(
                selectinload(FixGroupMember.student).selectinload(UserInfo.school),
                selectinload(FixGroupMember.fix_group).selectinload(FixGroup.class_info),
                selectinload(FixGroupMember.fix_group)
                .selectinload(FixGroup.leader)
                .selectinload(UserInfo.school),
            )
            .where(
                FixGroupMember.student_id == user_id,
                FixGroup.class_id == class_id,
            )
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        member = result.scalar_one_or_none()

        if member is None:
            return None

        return self._to_response(member.fix_group)

    async def convert_to_seminar_group(self, seminar_id: int, fixed_group_id: int) -> None:
        """Copy a fixed group into a seminar group. Not supported yet.

        Raises:
            NotImplementedError: Always.
        """
        raise NotImplementedError("Converting a fixed group to a seminar group is not supported")

    async def remove_member(self, fix_group_id: int, user_id: int) -> None:
        """Remove a student from a fixed group.

        Every membership row for the pair is removed.

        Args:
            fix_group_id: Fixed group identifier.
            user_id: Student identifier.

        Raises:
            InvalidArgumentError: If an id is not positive.
            FixGroupNotFoundError: If group not found.
            UserNotFoundError: If user not found.
        """
        _validate_id("fix_group_id", fix_group_id)
        _validate_id("user_id", user_id)

        group = await self._get_group(fix_group_id)
        user = await self._get_user(user_id)

        try:
            result = await self.db.execute(
                delete(FixGroupMember)
                .where(
                    FixGroupMember.fix_group_id == group.id,
                    FixGroupMember.student_id == user.id,
                )
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "Removed fix group member: group=%s, user=%s, removed=%s",
            fix_group_id,
            user_id,
            result.rowcount,
        )

    async def list_memberships_by_group(self, group_id: int) -> list[FixGroupMemberResponse]:
        """List raw membership records of a fixed group.

        Args:
            group_id: Fixed group identifier.

        Returns:
            Membership records in insertion order.

        Raises:
            InvalidArgumentError: If the id is not positive.
            FixGroupNotFoundError: If group not found.
        """
        _validate_id("group_id", group_id)

        await self._get_group(group_id)

        query = (
            select(FixGroupMember)
            .where(FixGroupMember.fix_group_id == group_id)
            .order_by(FixGroupMember.id)
        )
        result = await self.db.execute(query)

        return [self._to_member_response(m) for m in result.scalars().all()]

    async def _insert_member(self, group: FixGroup, user: UserInfo) -> int:
        """Create a membership row and commit it.

        Args:
            group: Existing fixed group.
            user: Existing user.

        Returns:
            ID of the new membership record.
        """
        member = FixGroupMember(fix_group_id=group.id, student_id=user.id)
        self.db.add(member)
        await self._commit()
        await self.db.refresh(member)

        logger.info(
            "Added fix group member: %s (group=%s, user=%s)", member.id, group.id, user.id
        )

        return member.id

    async def _commit(self) -> None:
        """Commit pending changes, rolling back if the commit fails."""
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def _get_class(self, class_id: int) -> ClassInfo:
        """Get class by ID.

        Raises:
            ClassNotFoundError: If not found.
        """
        query = select(ClassInfo).where(ClassInfo.id == class_id)
        result = await self.db.execute(query)
        class_ = result.scalar_one_or_none()

        if not class_:
            logger.debug("Class not found: %s", class_id)
            raise ClassNotFoundError(f"Class {class_id} not found")

        return class_

    async def _get_user(self, user_id: int) -> UserInfo:
        """Get user by ID.

        Raises:
            UserNotFoundError: If not found.
        """
        query = select(UserInfo).where(UserInfo.id == user_id)
        result = await self.db.execute(query)
        user = result.scalar_one_or_none()

        if not user:
            logger.debug("User not found: %s", user_id)
            raise UserNotFoundError(f"User {user_id} not found")

        return user

    async def _get_group(self, group_id: int) -> FixGroup:
        """Get fixed group by ID.

        Raises:
            FixGroupNotFoundError: If not found.
        """
        query = select(FixGroup).where(FixGroup.id == group_id)
        result = await self.db.execute(query)
        group = result.scalar_one_or_none()

        if not group:
            logger.debug("Fix group not found: %s", group_id)
            raise FixGroupNotFoundError(f"Fix group {group_id} not found")

        return group

    def _to_user_summary(self, user: UserInfo) -> UserSummary:
        """Convert user model to summary DTO.

        The school relationship must already be loaded.
        """
        school = None
        if user.school is not None:
            school = SchoolSummary(id=user.school.id, name=user.school.name)

        return UserSummary(
            id=user.id,
            name=user.name,
            number=user.number,
            type=user.type,
            school=school,
        )

    def _to_response(self, group: FixGroup) -> FixGroupResponse:
        """Convert fixed group model to response DTO.

        Class, leader and the leader's school must already be loaded.
        """
        return FixGroupResponse(
            id=group.id,
            class_info=ClassSummary(id=group.class_info.id, name=group.class_info.name),
            leader=self._to_user_summary(group.leader),
        )

    def _to_member_response(self, member: FixGroupMember) -> FixGroupMemberResponse:
        return FixGroupMemberResponse(
            id=member.id,
            fix_group_id=member.fix_group_id,
            student_id=member.student_id,
        )
