from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator


class OrganizerBase(BaseModel):
    full_name: str = Field(min_length=1, max_length=255)
    organization: str | None = Field(None, max_length=255)
    email: EmailStr

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return value.lower()


class OrganizerCreate(OrganizerBase):
    password: str = Field(min_length=8, max_length=128)


class OrganizerUpdate(BaseModel):
    full_name: str | None = Field(None, min_length=1, max_length=255)
    organization: str | None = Field(None, max_length=255)


class OrganizerResponse(BaseModel):
    id: UUID
    full_name: str
    organization: str | None
    role: str
    email: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
