from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from clubhub.domain.entities import Tournament


class ITournamentRepository(ABC):
    """Tournament repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tournament_id: UUID) -> Optional[Tournament]:
        """Get tournament by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Tournament]:
        """List tournaments, newest first"""
        pass

    @abstractmethod
    async def create(self, tournament: Tournament) -> Tournament:
        """Create a new tournament"""
        pass

    @abstractmethod
    async def update(self, tournament: Tournament) -> Tournament:
        """Update existing tournament"""
        pass

    @abstractmethod
    async def delete(self, tournament: Tournament) -> None:
        """Delete a tournament"""
        pass
