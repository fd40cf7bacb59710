from datetime import timedelta
from uuid import uuid4

from clubhub.domain.base import utcnow
from clubhub.domain.entities import (
    Event,
    EventMode,
    EventParticipant,
    EventStatus,
    EventType,
    ParticipantStatus,
)


def make_event(
    mode=EventMode.workshop,
    type=EventType.individual,
    status=EventStatus.registration_open,
    max_participants=10,
    deadline_in=timedelta(days=1),
    team_size=1,
    title="Intro to Rust",
):
    now = utcnow()
    return Event(
        id=uuid4(),
        title=title,
        mode=mode,
        type=type,
        status=status,
        max_participants=max_participants,
        team_size=team_size,
        registration_deadline=now + deadline_in,
        start_date=now + timedelta(days=2),
        end_date=now + timedelta(days=2, hours=2),
    )


def make_participant(event, name="Ada Member", email="ada@club.org", attended=False, registered_at=None):
    return EventParticipant(
        id=uuid4(),
        event_id=event.id,
        user_id=uuid4(),
        name=name,
        email=email,
        status=ParticipantStatus.confirmed if attended else ParticipantStatus.registered,
        attended=attended,
        registered_at=registered_at or utcnow(),
    )
