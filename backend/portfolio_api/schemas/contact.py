from __future__ import annotations

from datetime import datetime, timezone

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContactSubmissionCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255)
    message: str = Field(min_length=10, max_length=1000)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(str(e)) from e
        # Stored exactly as submitted, not the normalized form
        return value


class ContactSubmissionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    message: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; they were written as UTC
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
