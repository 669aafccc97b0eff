"""Profile picture validation - runs before anything touches storage."""

import mimetypes

from ideahub.config import settings
from ideahub.exceptions import PictureValidationError

ALLOWED_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "webp"})


def file_extension(filename: str) -> str:
    """Lower-cased extension without the dot ('' when there is none)."""
    _, dot, ext = filename.rpartition(".")
    return ext.lower() if dot else ""


def validate_picture(
    filename: str,
    size: int,
    content_type: str | None = None,
    max_bytes: int | None = None,
    allowed_types: list[str] | None = None,
) -> str:
    """
    Check a picture's type and size, returning its extension.

    Raises PictureValidationError with reason ``UNSUPPORTED_TYPE`` or
    ``FILE_TOO_LARGE``.
    """
    max_bytes = settings.picture_max_bytes if max_bytes is None else max_bytes
    allowed_types = allowed_types or settings.picture_allowed_types

    ext = file_extension(filename)
    mime = content_type or mimetypes.guess_type(filename)[0]
    if ext not in ALLOWED_EXTENSIONS or mime not in allowed_types:
        raise PictureValidationError(
            "UNSUPPORTED_TYPE",
            "Please select a JPEG, PNG, or WebP image",
            "يرجى اختيار صورة بصيغة JPEG، PNG، أو WebP",
        )

    if size > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise PictureValidationError(
            "FILE_TOO_LARGE",
            f"Image must be less than {limit_mb}MB",
            f"يجب أن يكون حجم الصورة أقل من {limit_mb} ميجابايت",
        )

    return ext
