"""Domain model entities for EchoFinder."""

from echofinder.domain.model.invite import Invite
from echofinder.domain.model.user import User

__all__ = [
    "User",
    "Invite",
]
