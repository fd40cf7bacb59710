from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from clubhub.domain.entities import ProfileRole


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, resolved once per request and passed to use cases"""

    user_id: UUID
    role: ProfileRole
    member_role: Optional[str] = None

    @property
    def is_core(self) -> bool:
        return self.role == ProfileRole.core
