from typing import Optional

from clubhub.app.services.identity import Identity
from clubhub.libs.result import Error, ErrorKind

NOT_AUTHORIZED = Error(ErrorKind.FORBIDDEN, "NOT_AUTHORIZED", "Not authorized")


def core_only(identity: Identity) -> Optional[Error]:
    """Error for callers outside the core team, None otherwise"""
    if identity.is_core:
        return None
    return Error(ErrorKind.FORBIDDEN, "CORE_ONLY", "Only core team members can perform this action")
