from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, model_validator


class EventCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=500)
    start_date: datetime
    end_date: datetime
    location: str = Field(min_length=1, max_length=255)

    @model_validator(mode="after")
    def _check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class EventResponse(BaseModel):
    id: UUID
    owner_id: UUID
    name: str
    description: str
    start_date: datetime
    end_date: datetime
    location: str
    created_at: datetime

    model_config = {"from_attributes": True}
