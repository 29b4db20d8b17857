"""Tests for the AuthenticationService."""

import pytest

from catalog.application.authenticate import AuthenticationService, Credential
from catalog.domain.exceptions import AuthorizationError
from catalog.domain.model.user import Permission, Role


class TestAuthenticate:

    def test_admin_credentials(self):
        identity = AuthenticationService().authenticate("carlos", "admin123")
        assert identity is not None
        assert identity.role is Role.ADMIN

    def test_regular_credentials(self):
        identity = AuthenticationService().authenticate("maria", "user123")
        assert identity is not None
        assert identity.role is Role.REGULAR

    @pytest.mark.parametrize("username,password", [
        ("carlos", "wrong"),
        ("nobody", "admin123"),
        ("", ""),
        (None, None),
    ])
    def test_rejected(self, username, password):
        assert AuthenticationService().authenticate(username, password) is None

    def test_injected_credentials_replace_defaults(self):
        service = AuthenticationService({"ops": Credential(id=9, password="pw", role=Role.ADMIN)})
        assert service.authenticate("ops", "pw").id == 9
        assert service.authenticate("carlos", "admin123") is None


class TestAuthorize:

    def test_regular_user_cannot_delete(self):
        service = AuthenticationService()
        maria = service.authenticate("maria", "user123")
        service.authorize(maria, Permission.UPDATE)
        with pytest.raises(AuthorizationError, match="not allowed to delete"):
            service.authorize(maria, Permission.DELETE)

    def test_anonymous_rejected(self):
        with pytest.raises(AuthorizationError, match="Authentication required"):
            AuthenticationService.authorize(None, Permission.CREATE)
