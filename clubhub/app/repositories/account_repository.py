from abc import ABC, abstractmethod
from typing import Optional

from clubhub.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email"""
        pass

    @abstractmethod
    async def get_by_verification_token_hash(self, token_hash: str) -> Optional[Account]:
        """Get account by hashed verification token"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass
