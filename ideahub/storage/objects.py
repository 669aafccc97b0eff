"""Profile picture bucket - per-user object namespace on local disk."""

import logging
import time
from pathlib import Path

import aiofiles
import aiofiles.os

from ideahub.config import settings

logger = logging.getLogger(__name__)


class PictureStore:
    """
    Objects live at ``<root>/<user_id>/<name>`` and are served from
    ``<public_url>/<user_id>/<name>``.
    """

    def __init__(self, root: str | None = None, public_url: str | None = None):
        self.root = Path(root or settings.storage_root)
        self.public_url = (public_url or settings.storage_public_url).rstrip("/")

    def _object_path(self, user_id: str, name: str) -> Path:
        # Prevent path traversal
        if "/" in user_id or "/" in name or ".." in user_id or ".." in name:
            raise ValueError("Path traversal detected")
        return self.root / user_id / name

    @staticmethod
    def new_object_name(ext: str) -> str:
        """Time-based object name, e.g. 1760832000123.png."""
        return f"{int(time.time() * 1000)}.{ext}"

    def public_url_for(self, user_id: str, name: str) -> str:
        return f"{self.public_url}/{user_id}/{name}"

    def name_from_url(self, url: str) -> str:
        """Object name is the last URL segment."""
        return url.rstrip("/").rsplit("/", 1)[-1]

    async def upload(self, user_id: str, name: str, data: bytes) -> str:
        """Write an object (overwriting any existing one) and return its public URL."""
        path = self._object_path(user_id, name)
        await aiofiles.os.makedirs(path.parent, exist_ok=True)
        async with aiofiles.open(path, "wb") as f:
            await f.write(data)
        logger.info("Stored picture %s/%s (%d bytes)", user_id, name, len(data))
        return self.public_url_for(user_id, name)

    async def remove(self, user_id: str, name: str) -> bool:
        """Delete an object; returns False when it was already gone."""
        path = self._object_path(user_id, name)
        if not await aiofiles.os.path.exists(path):
            return False
        await aiofiles.os.remove(path)
        logger.info("Removed picture %s/%s", user_id, name)
        return True


picture_store = PictureStore()


def get_picture_store() -> PictureStore:
    """Dependency for the profile picture bucket."""
    return picture_store
