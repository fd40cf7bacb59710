"""
Attendance Use Case DTOs
"""

from typing import List
from uuid import UUID

from pydantic import BaseModel

from clubhub.app.use_cases.events.dtos import EventInfo, ParticipantInfo


class AttendanceUpdate(BaseModel):
    participant_id: UUID
    attended: bool


class AttendanceSheet(BaseModel):
    workshop: EventInfo
    participants: List[ParticipantInfo]
    total_participants: int
    attended_count: int


class UpdateAttendanceResponse(BaseModel):
    updated: int
    total_participants: int
    attended_count: int
    attendance_rate: int


class RegistrationsExport(BaseModel):
    filename: str
    content: str
