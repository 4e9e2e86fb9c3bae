# resetstore/modules/password_reset/schemas.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PasswordResetToken(BaseModel):
    """
    One outstanding password reset attempt.

    The selector is the public lookup key; verifier_hash is the stored hash of
    the secret half and is compared by the caller after lookup.
    token_id stays None until storage assigns it.
    """

    model_config = ConfigDict(from_attributes=True)

    token_id: Optional[int] = None
    user_id: int
    selector: str = Field(min_length=1)
    verifier_hash: str = Field(min_length=1, repr=False)
    expiration_time: datetime
    created_at: datetime = Field(default_factory=_utcnow)

    @field_validator("expiration_time", "created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # TIMESTAMPTZ columns; naive values are taken as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
