from abc import ABC, abstractmethod
from typing import Callable

from clubhub.app.repositories.account_repository import IAccountRepository
from clubhub.app.repositories.announcement_repository import IAnnouncementRepository
from clubhub.app.repositories.application_repository import IApplicationRepository
from clubhub.app.repositories.audit_log_repository import IAuditLogRepository
from clubhub.app.repositories.event_repository import IEventRepository
from clubhub.app.repositories.event_winner_repository import IEventWinnerRepository
from clubhub.app.repositories.invitation_repository import IInvitationRepository
from clubhub.app.repositories.notification_repository import INotificationRepository
from clubhub.app.repositories.participant_repository import IParticipantRepository
from clubhub.app.repositories.pending_user_repository import IPendingUserRepository
from clubhub.app.repositories.profile_repository import IProfileRepository
from clubhub.app.repositories.team_member_repository import ITeamMemberRepository
from clubhub.app.repositories.team_registration_repository import ITeamRegistrationRepository
from clubhub.app.repositories.team_repository import ITeamRepository
from clubhub.app.repositories.tournament_repository import ITournamentRepository
from clubhub.app.repositories.workshop_host_repository import IWorkshopHostRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    profiles: IProfileRepository
    pending_users: IPendingUserRepository
    events: IEventRepository
    workshop_hosts: IWorkshopHostRepository
    participants: IParticipantRepository
    audit_logs: IAuditLogRepository
    teams: ITeamRepository
    team_members: ITeamMemberRepository
    team_registrations: ITeamRegistrationRepository
    invitations: IInvitationRepository
    applications: IApplicationRepository
    notifications: INotificationRepository
    announcements: IAnnouncementRepository
    tournaments: ITournamentRepository
    event_winners: IEventWinnerRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass


# Builds a fresh unit of work per call, for read fan-out across sessions
UnitOfWorkFactory = Callable[[], UnitOfWork]
