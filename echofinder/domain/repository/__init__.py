"""Repository interfaces for EchoFinder domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from echofinder.domain.repository.invite import InviteRepository
from echofinder.domain.repository.user import UserRepository

__all__ = [
    "InviteRepository",
    "UserRepository",
]
