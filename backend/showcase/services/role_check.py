"""Role Check — admin gating against the user_roles table.

Invariants:
    - has_role is a single EXISTS-style lookup; no caching between requests
    - Unknown users simply have no roles (False, never an error)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.core.domain_types import Role, UserId
from showcase.models.user_role import UserRole

logger = logging.getLogger(__name__)


async def has_role(db: AsyncSession, user_id: UserId, role: Role | str) -> bool:
    """True when (user_id, role) is granted."""
    role_value = role.value if isinstance(role, Role) else role
    result = await db.execute(
        select(UserRole.id)
        .where(UserRole.user_id == user_id, UserRole.role == role_value)
        .limit(1),
    )
    return result.scalar_one_or_none() is not None


async def grant_role(db: AsyncSession, user_id: UserId, role: Role | str) -> UserRole:
    """Insert a role grant if missing. Used by the bootstrap CLI."""
    role_value = role.value if isinstance(role, Role) else role
    result = await db.execute(
        select(UserRole).where(UserRole.user_id == user_id, UserRole.role == role_value),
    )
    existing = result.scalar_one_or_none()
    if existing:
        return existing
    grant = UserRole(user_id=user_id, role=role_value)
    db.add(grant)
    await db.commit()
    await db.refresh(grant)
    logger.info(f"Granted role {role_value} to {user_id}")
    return grant
