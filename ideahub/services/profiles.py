"""Profile picture upload and removal."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ideahub.engine.validation import validate_picture
from ideahub.exceptions import FetchError
from ideahub.models import Profile
from ideahub.storage import repositories
from ideahub.storage.objects import PictureStore

logger = logging.getLogger(__name__)


async def replace_picture(
    db: AsyncSession,
    store: PictureStore,
    profile: Profile,
    filename: str,
    data: bytes,
    content_type: str | None = None,
) -> str:
    """
    Validate and store a new profile picture, dropping the previous one.

    Validation runs first; a rejected file never reaches the bucket.
    """
    ext = validate_picture(filename, len(data), content_type)
    try:
        if profile.profile_picture_url:
            await store.remove(profile.id, store.name_from_url(profile.profile_picture_url))
        url = await store.upload(profile.id, store.new_object_name(ext), data)
        await repositories.update_profile_picture(db, profile, url)
    except (OSError, SQLAlchemyError) as e:
        logger.exception("Error uploading picture for user %s", profile.id)
        raise FetchError("Failed to upload picture", {"user_id": profile.id}) from e
    return url


async def remove_picture(db: AsyncSession, store: PictureStore, profile: Profile) -> None:
    """Delete the current picture, if any, and clear it from the profile."""
    if not profile.profile_picture_url:
        return
    try:
        await store.remove(profile.id, store.name_from_url(profile.profile_picture_url))
        await repositories.update_profile_picture(db, profile, None)
    except (OSError, SQLAlchemyError) as e:
        logger.exception("Error removing picture for user %s", profile.id)
        raise FetchError("Failed to remove picture", {"user_id": profile.id}) from e
