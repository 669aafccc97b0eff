"""Caller identity - resolves the profile forwarded by the auth gateway."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from ideahub.database import get_db
from ideahub.models import Profile
from ideahub.storage.repositories import get_profile

USER_ID_HEADER = APIKeyHeader(name="X-User-Id", auto_error=False)


async def get_current_profile(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: str | None = Depends(USER_ID_HEADER),
) -> Profile:
    """Extract the caller's profile from the X-User-Id header."""
    if not user_id or not user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )
    profile = await get_profile(db, user_id.strip())
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unknown user",
        )
    if profile.is_active is False:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is deactivated",
        )
    return profile


# Type alias for dependency injection
ProfileDep = Annotated[Profile, Depends(get_current_profile)]


def require_role(*roles: str):
    """Dependency factory restricting an endpoint to the given roles."""

    async def _check(profile: ProfileDep) -> Profile:
        if profile.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires role: {', '.join(roles)}",
            )
        return profile

    return _check
