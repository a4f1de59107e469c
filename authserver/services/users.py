#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
User service — account lookup and the per-request current-user view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession


# -----------------------------------------------------------------------------

from authserver.models import NodeStakeholder, User


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CurrentUser:
    """
    Read-only capability view of the logged-in user.

    Built once per request so the page layer never touches the database
    to answer a role question.
    """

    id: str
    username: str
    super_admin: bool = False
    owned_nodes: int = 0
    nobody: bool = False

    def is_nobody(self) -> bool:
        return self.nobody

    def is_super_admin(self) -> bool:
        return self.super_admin

    def is_owner(self) -> bool:
        return self.owned_nodes > 0


# -----------------------------------------------------------------------------

async def create_user(
    db: AsyncSession,
    username: str,
    email: str = "",
    is_super_admin: bool = False,
) -> User:
    existing = await get_user_by_username(db, username)
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already registered",
        )
    user = User(username=username, email=email, is_super_admin=is_super_admin)
    db.add(user)
    await db.flush()
    return user


# -----------------------------------------------------------------------------

async def get_user_by_id_or_none(db: AsyncSession, user_id: str | None) -> User | None:
    """Return User or None — for optional-auth pages."""
    if not user_id:
        return None
    return await db.get(User, user_id)


async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


# -----------------------------------------------------------------------------

async def count_owned_nodes(db: AsyncSession, user_id: str) -> int:
    result = await db.execute(
        select(func.count(NodeStakeholder.id)).where(
            NodeStakeholder.user_id == user_id,
            NodeStakeholder.is_owner == True,  # noqa: E712
        )
    )
    return int(result.scalar_one())


async def load_current_user(db: AsyncSession, user_id: str | None) -> CurrentUser | None:
    """Resolve the session's user id into a CurrentUser (None when anonymous)."""
    user = await get_user_by_id_or_none(db, user_id)
    if not user:
        return None
    return CurrentUser(
        id=user.id,
        username=user.username,
        super_admin=user.is_super_admin,
        owned_nodes=await count_owned_nodes(db, user.id),
        nobody=user.is_splash_only,
    )



# -----------------------------------------------------------------------------
