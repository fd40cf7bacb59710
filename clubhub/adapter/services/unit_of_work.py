from sqlmodel.ext.asyncio.session import AsyncSession

from clubhub.adapter.repositories.account_repository import AccountRepository
from clubhub.adapter.repositories.announcement_repository import AnnouncementRepository
from clubhub.adapter.repositories.application_repository import ApplicationRepository
from clubhub.adapter.repositories.audit_log_repository import AuditLogRepository
from clubhub.adapter.repositories.event_repository import EventRepository
from clubhub.adapter.repositories.event_winner_repository import EventWinnerRepository
from clubhub.adapter.repositories.invitation_repository import InvitationRepository
from clubhub.adapter.repositories.notification_repository import NotificationRepository
from clubhub.adapter.repositories.participant_repository import ParticipantRepository
from clubhub.adapter.repositories.pending_user_repository import PendingUserRepository
from clubhub.adapter.repositories.profile_repository import ProfileRepository
from clubhub.adapter.repositories.team_member_repository import TeamMemberRepository
from clubhub.adapter.repositories.team_registration_repository import TeamRegistrationRepository
from clubhub.adapter.repositories.team_repository import TeamRepository
from clubhub.adapter.repositories.tournament_repository import TournamentRepository
from clubhub.adapter.repositories.workshop_host_repository import WorkshopHostRepository
from clubhub.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, owns_session: bool = False):
        self.session = session
        # Sessions handed out by a factory are closed with the unit of work
        self.owns_session = owns_session

    async def __aenter__(self):
        self.accounts = AccountRepository(self.session)
        self.profiles = ProfileRepository(self.session)
        self.pending_users = PendingUserRepository(self.session)
        self.events = EventRepository(self.session)
        self.workshop_hosts = WorkshopHostRepository(self.session)
        self.participants = ParticipantRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session)
        self.teams = TeamRepository(self.session)
        self.team_members = TeamMemberRepository(self.session)
        self.team_registrations = TeamRegistrationRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.applications = ApplicationRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        self.announcements = AnnouncementRepository(self.session)
        self.tournaments = TournamentRepository(self.session)
        self.event_winners = EventWinnerRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()
        if self.owns_session:
            await self.session.close()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
