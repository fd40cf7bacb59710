"""
Event & Workshop Use Cases
"""

from .browse_events_use_case import (
    GetWorkshopAdminDetailsUseCase,
    GetWorkshopDetailsUseCase,
    ListAvailableWorkshopsUseCase,
    ListEventsUseCase,
    ListMyWorkshopsUseCase,
)
from .dtos import (
    AvailableWorkshop,
    CreateEventCommand,
    EventInfo,
    GroupedEventsResponse,
    HostInfo,
    HostInput,
    MyWorkshop,
    ParticipantInfo,
    RegistrationResponse,
    UpdateEventCommand,
    WorkshopAdminDetails,
    WorkshopCommand,
    WorkshopDetails,
)
from .manage_events_use_case import CreateEventUseCase, DeleteEventUseCase, UpdateEventUseCase
from .manage_workshops_use_case import (
    CompleteWorkshopUseCase,
    CreateWorkshopUseCase,
    DeleteWorkshopUseCase,
    UpdateWorkshopUseCase,
)
from .register_use_case import CancelRegistrationUseCase, RegisterUseCase

__all__ = [
    # Use Cases
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
    "CreateWorkshopUseCase",
    "UpdateWorkshopUseCase",
    "CompleteWorkshopUseCase",
    "DeleteWorkshopUseCase",
    "ListEventsUseCase",
    "ListAvailableWorkshopsUseCase",
    "ListMyWorkshopsUseCase",
    "GetWorkshopDetailsUseCase",
    "GetWorkshopAdminDetailsUseCase",
    "RegisterUseCase",
    "CancelRegistrationUseCase",
    # DTOs - Commands
    "CreateEventCommand",
    "UpdateEventCommand",
    "WorkshopCommand",
    "HostInput",
    # DTOs - Responses
    "EventInfo",
    "GroupedEventsResponse",
    "AvailableWorkshop",
    "MyWorkshop",
    "WorkshopDetails",
    "WorkshopAdminDetails",
    "HostInfo",
    "ParticipantInfo",
    "RegistrationResponse",
]
