"""Authenticated actor value object"""

from dataclasses import dataclass
from uuid import UUID

from ..enums import ActorRole


@dataclass(frozen=True)
class ActorPayload:
    """Decoded token claims after the account row has been checked."""

    id: UUID
    role: ActorRole

    def owns(self, owner_id: UUID) -> bool:
        return self.id == owner_id
