from __future__ import annotations

from datetime import datetime, timezone

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


class NewsletterSubscriptionCreate(BaseModel):
    email: str = Field(max_length=255)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(str(e)) from e
        # Subscriptions match on the exact string, so keep it unnormalized
        return value


class NewsletterSubscriptionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    subscribed_at: datetime
    is_active: bool

    @field_validator("subscribed_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
