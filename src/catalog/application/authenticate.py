"""Application service: authentication and permission checks.

The credential table is injected, so tests and deployments can supply
their own. Product use cases never see this module; callers resolve
the identity and check the permission before invoking them.
"""

from __future__ import annotations

import hmac
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from catalog.domain.exceptions import AuthorizationError
from catalog.domain.model.user import Permission, Role, UserIdentity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    id: int
    password: str
    role: Role


DEFAULT_CREDENTIALS: dict[str, Credential] = {
    "carlos": Credential(id=1, password="admin123", role=Role.ADMIN),
    "maria": Credential(id=2, password="user123", role=Role.REGULAR),
}


class AuthenticationService:

    def __init__(self, credentials: Mapping[str, Credential] | None = None) -> None:
        self._credentials = dict(DEFAULT_CREDENTIALS if credentials is None else credentials)

    def authenticate(self, username: str | None, password: str | None) -> UserIdentity | None:
        """Return the identity for a valid username/password pair, else None."""
        if not username or not password:
            return None
        credential = self._credentials.get(username)
        if credential is None:
            logger.info("Login rejected for unknown user %r", username)
            return None
        if not hmac.compare_digest(credential.password.encode(), password.encode()):
            logger.info("Login rejected for user %r", username)
            return None
        return UserIdentity(id=credential.id, username=username, role=credential.role)

    @staticmethod
    def authorize(identity: UserIdentity | None, permission: Permission) -> None:
        """Raise AuthorizationError unless *identity* holds *permission*."""
        if identity is None:
            raise AuthorizationError("Authentication required")
        if not identity.can(permission):
            raise AuthorizationError(
                f"User '{identity.username}' is not allowed to {permission.value} products"
            )
