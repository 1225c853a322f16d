"""Domain entity representing a platform user."""

from dataclasses import dataclass
from datetime import datetime


from .role import Role


@dataclass
class User:
    """Account that can authenticate against the API."""

    id: int | None
    role: Role
    name: str
    email: str
    is_active: bool = True
    created_at: datetime | None = None

    def is_admin(self) -> bool:
        """Return ``True`` for administrators and super administrators."""

        return self.role.grants_admin()


__all__ = ["User"]
