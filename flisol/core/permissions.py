from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional


ACCESS_CONTENT = "access content"


@dataclass(frozen=True)
class Caller:
    id: Optional[str] = None  # None for anonymous callers
    permissions: FrozenSet[str] = field(default_factory=frozenset)
    is_admin: bool = False

    @property
    def is_anonymous(self) -> bool:
        return self.id is None


class AuthorizationProvider:
    """Answers permission checks for the caller of the current request."""

    def has_permission(self, caller: Caller, permission: str) -> bool:
        if caller.is_admin:
            return True
        return permission in caller.permissions
