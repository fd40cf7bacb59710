"""
Account Entity

Credentials behind a profile.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from clubhub.domain.base import utcnow


class Account(SQLModel, table=True):
    """
    Account entity - login credentials created at signup.

    Business Rules:
    - Email must be unique across all accounts
    - Password stored as bcrypt hash (cost factor 12)
    - Verification token stored as SHA-256 hash, single-use, 24h lifetime
    - Account id becomes the Profile id once the email is confirmed
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)

    email_confirmed: bool = Field(default=False)
    verification_token_hash: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    verification_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
