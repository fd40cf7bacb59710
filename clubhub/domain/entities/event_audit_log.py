"""
EventAuditLog Entity

Immutable log of administrative actions on events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from clubhub.domain.base import utcnow


class EventAuditLog(SQLModel, table=True):
    """
    EventAuditLog entity - append-only record of core-team actions.

    Business Rules:
    - Immutable (never updated)
    - Only removed together with the workshop it belongs to
    - Metadata stores action specific context (counts, titles, rates)
    """

    __tablename__ = "event_audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: Optional[UUID] = Field(default=None, index=True)
    performed_by: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)  # e.g., "attendance_updated"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    performed_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_performed_at", "performed_at"),
        Index("idx_audit_event_action", "event_id", "action"),
    )
