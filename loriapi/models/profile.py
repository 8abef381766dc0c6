"""User profile data model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserField(str, Enum):
    """Wire names of the profile fields returned by the provider."""
    ID = "id"
    XP = "xp"
    DREAMS = "sonhos"
    ABOUT_ME = "aboutMe"
    GENDER = "gender"
    EMOJI_FIGHT_EMOJI = "emojiFightEmoji"


class UserProfile(BaseModel):
    """Represents a Loritta user profile."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    id: str | None = Field(default=None, alias=UserField.ID.value)
    xp: int = Field(default=0, ge=0, alias=UserField.XP.value)
    dreams: int = Field(default=0, alias=UserField.DREAMS.value)
    about_me: str | None = Field(default=None, alias=UserField.ABOUT_ME.value)
    gender: str | None = Field(default=None, alias=UserField.GENDER.value)
    emoji_fight_emoji: str | None = Field(default=None, alias=UserField.EMOJI_FIGHT_EMOJI.value)

    @field_validator("xp", "dreams", mode="before")
    @classmethod
    def _null_to_zero(cls, value):
        return 0 if value is None else value
