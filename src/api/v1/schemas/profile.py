"""Pydantic schemas for the directory and settings screens."""

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import ScreenEffects


class DirectoryEntryResponse(BaseModel):
    """One row of the profile directory."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "4f1c2a9e8b7d4c3a9f0e1d2c3b4a5968",
                "email": "b@x.com",
                "name": "Bea",
                "avatar_url": "https://randomuser.me/api/portraits/lego/1.jpg",
                "is_current_user": True,
            }
        },
    )

    id: str | None
    email: str
    name: str
    avatar_url: str
    is_current_user: bool


class DirectoryResponse(BaseModel):
    """Schema for the profile directory."""

    data: list[DirectoryEntryResponse]
    meta: dict[str, int]


class ProfileSettings(BaseModel):
    """Editable profile fields as loaded by the settings screen."""

    profile_id: str | None
    email: str
    display_name: str
    avatar_url: str


class ProfileSettingsResponse(ScreenEffects):
    """Schema for the settings screen."""

    data: ProfileSettings


class ProfileSettingsUpdate(BaseModel):
    """Schema for saving the settings screen; both fields are written as given."""

    display_name: str = Field("", max_length=100)
    avatar_url: str = Field("", max_length=500)
