"""
Attendance Use Cases
"""

from .attendance_use_case import GetAttendanceSheetUseCase, UpdateAttendanceUseCase
from .dtos import AttendanceSheet, AttendanceUpdate, RegistrationsExport, UpdateAttendanceResponse
from .registrations_use_case import (
    ExportRegistrationsCsvUseCase,
    ListRegistrationsUseCase,
    build_registrations_csv,
)

__all__ = [
    "GetAttendanceSheetUseCase",
    "UpdateAttendanceUseCase",
    "ListRegistrationsUseCase",
    "ExportRegistrationsCsvUseCase",
    "build_registrations_csv",
    "AttendanceSheet",
    "AttendanceUpdate",
    "UpdateAttendanceResponse",
    "RegistrationsExport",
]
