"""Unit tests for user roles and permissions."""

from catalog.domain.model.user import Permission, Role, UserIdentity


class TestUserIdentity:

    def test_admin_has_every_permission(self):
        admin = UserIdentity(id=1, username="carlos", role=Role.ADMIN)
        assert all(admin.can(p) for p in Permission)
        assert admin.is_admin

    def test_regular_user_cannot_delete(self):
        user = UserIdentity(id=2, username="maria", role=Role.REGULAR)
        assert user.can(Permission.CREATE)
        assert user.can(Permission.UPDATE)
        assert not user.can(Permission.DELETE)
        assert not user.is_admin
