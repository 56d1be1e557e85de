from pydantic import BaseModel, Field, field_validator
from typing import Optional

from ttscore.models.enumerations import GroupKey


class Subject(BaseModel):
    """
    The person being tested. Carried through to the summary, not validated
    beyond presence.
    """

    name: str = Field(default="", description="Full name (free text)")
    age: str = Field(default="", description="Age as entered")
    gender: Optional[str] = Field(
        default=None,
        description="'male', 'female', or anything else for unknown",
    )

    @field_validator("age", mode="before")
    @classmethod
    def coerce_age(cls, v):
        if v is None:
            return ""
        return str(v)


class ScoreEntry(BaseModel):
    """One accepted score in a group slot."""

    group: GroupKey
    slot: int = Field(..., ge=1, le=6, description="1-based slot within the group")
    value: int = Field(..., ge=0, le=30)

    @property
    def field_key(self) -> str:
        return f"{self.group.value}_{self.slot}"

    model_config = {"frozen": True}
