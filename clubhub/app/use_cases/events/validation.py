"""
Validation rules shared by event and workshop commands.
"""

from datetime import datetime
from typing import Optional

from clubhub.domain.base import to_naive_utc
from clubhub.libs.result import Error, ErrorKind

from .dtos import WorkshopCommand

MAX_HOSTS = 10


def _invalid(code: str, message: str) -> Error:
    return Error(ErrorKind.VALIDATION, code, message)


def validate_schedule(
    registration_deadline: datetime, start_date: datetime, end_date: datetime
) -> Optional[Error]:
    if registration_deadline >= start_date:
        return _invalid("INVALID_SCHEDULE", "Registration deadline must be before the start date")
    if start_date > end_date:
        return _invalid("INVALID_SCHEDULE", "End date must not be before the start date")
    return None


def validate_workshop(
    command: WorkshopCommand, now: datetime, require_future_start: bool = True
) -> Optional[Error]:
    """
    Return the first violated workshop rule, or None.

    Dates are expected as naive UTC.
    """
    title = command.title.strip()
    if not 3 <= len(title) <= 200:
        return _invalid("INVALID_TITLE", "Title must be between 3 and 200 characters")

    description = command.description.strip()
    if not 20 <= len(description) <= 5000:
        return _invalid("INVALID_DESCRIPTION", "Description must be between 20 and 5000 characters")

    if not 1 <= command.max_participants <= 500:
        return _invalid("INVALID_CAPACITY", "Max participants must be between 1 and 500")

    error = validate_schedule(
        command.registration_deadline, command.start_date, command.end_date
    )
    if error:
        return error

    if require_future_start and command.start_date <= now:
        return _invalid("INVALID_SCHEDULE", "Start date must be in the future")

    if not 1 <= len(command.hosts) <= MAX_HOSTS:
        return _invalid("INVALID_HOSTS", f"A workshop needs between 1 and {MAX_HOSTS} hosts")

    for host in command.hosts:
        if len(host.name.strip()) < 2:
            return _invalid("INVALID_HOSTS", "Host names must be at least 2 characters")

    return None


def with_naive_dates(command):
    """Copy of a command with every datetime field converted to naive UTC"""
    updates = {
        name: to_naive_utc(value) for name, value in command if isinstance(value, datetime)
    }
    return command.model_copy(update=updates)
