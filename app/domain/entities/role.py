"""Domain entity representing a user role."""

from dataclasses import dataclass

ADMIN_ROLE_ALIASES = frozenset({"admin", "super_admin"})


@dataclass(frozen=True)
class Role:
    """Role assigned to a platform account (student, teacher, admin...)."""

    id: int
    name: str
    alias: str

    def grants_admin(self) -> bool:
        """Return ``True`` when the role may run administrative operations."""

        return self.alias.lower() in ADMIN_ROLE_ALIASES


__all__ = ["ADMIN_ROLE_ALIASES", "Role"]
