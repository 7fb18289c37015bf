"""
Caller identity passed explicitly to every action handler.

Authentication happens in the calling layer; this package only receives the
resolved user and refuses to do anything without one.
"""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import UnauthorizedException


@dataclass(frozen=True)
class UserIdentity:
    """An already-authenticated caller."""

    user_id: str


def require_user(identity: Optional[UserIdentity]) -> UserIdentity:
    """
    Return the identity, or fail when the caller is anonymous.

    Raises:
        UnauthorizedException: If no identity or an empty user id was supplied
    """
    if identity is None or not identity.user_id:
        raise UnauthorizedException()
    return identity
