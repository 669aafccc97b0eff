"""Profile schemas."""

from pydantic import BaseModel, ConfigDict


class ProfileOut(BaseModel):
    """Profile snapshot."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str | None = None
    full_name: str | None = None
    role: str
    department: str | None = None
    profile_picture_url: str | None = None
    is_active: bool | None = None
    email_confirmed: bool | None = None


class PictureResponse(BaseModel):
    """Profile picture update result."""

    profile_picture_url: str | None
