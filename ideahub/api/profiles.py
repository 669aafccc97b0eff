"""Profile endpoints - current user, picture, role lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideahub.auth.middleware import ProfileDep, require_role
from ideahub.database import get_db
from ideahub.models import Profile
from ideahub.schemas.profile import PictureResponse, ProfileOut
from ideahub.services.profiles import remove_picture, replace_picture
from ideahub.storage.objects import PictureStore, get_picture_store
from ideahub.storage.repositories import get_user_role

router = APIRouter()


@router.get("/profile", response_model=ProfileOut)
async def get_own_profile(profile: ProfileDep):
    """Caller's profile."""
    return ProfileOut.model_validate(profile)


@router.put("/profile/picture", response_model=PictureResponse)
async def upload_picture(
    profile: ProfileDep,
    db: Annotated[AsyncSession, Depends(get_db)],
    store: Annotated[PictureStore, Depends(get_picture_store)],
    file: UploadFile = File(...),
):
    """Replace the caller's profile picture (JPEG, PNG or WebP, at most 5MB)."""
    data = await file.read()
    url = await replace_picture(
        db,
        store,
        profile,
        filename=file.filename or "",
        data=data,
        content_type=file.content_type,
    )
    return PictureResponse(profile_picture_url=url)


@router.delete("/profile/picture", response_model=PictureResponse)
async def delete_picture(
    profile: ProfileDep,
    db: Annotated[AsyncSession, Depends(get_db)],
    store: Annotated[PictureStore, Depends(get_picture_store)],
):
    """Remove the caller's profile picture."""
    await remove_picture(db, store, profile)
    return PictureResponse(profile_picture_url=None)


@router.get("/users/{user_id}/role")
async def user_role(
    user_id: str,
    _: Annotated[Profile, Depends(require_role("management"))],
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Role of any user (management only)."""
    role = await get_user_role(db, user_id)
    if role is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return {"user_id": user_id, "role": role}
