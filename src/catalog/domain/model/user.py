"""Identity and permissions of the person operating the catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    ADMIN = "admin"
    REGULAR = "regular"


class Permission(Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


_ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.ADMIN: frozenset(Permission),
    Role.REGULAR: frozenset({Permission.CREATE, Permission.UPDATE}),
}


@dataclass(frozen=True)
class UserIdentity:
    """An authenticated user. Regular users may not delete products."""

    id: int
    username: str
    role: Role

    def can(self, permission: Permission) -> bool:
        return permission in _ROLE_PERMISSIONS[self.role]

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
