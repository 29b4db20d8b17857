"""CLI commands for checking credentials."""

from __future__ import annotations

import click

from catalog.domain.model.user import Permission
from catalog.infrastructure.bootstrap import authentication_service
from catalog.infrastructure.cli.common import credential_options


@click.command("whoami")
@credential_options
def auth_whoami(username: str | None, password: str | None) -> None:
    """Show the role and permissions for a set of credentials."""
    identity = authentication_service().authenticate(username, password)
    if identity is None:
        raise click.ClickException("Invalid username or password")

    allowed = [p.value for p in Permission if identity.can(p)]
    click.echo(f"User:        {identity.username} (#{identity.id})")
    click.echo(f"Role:        {identity.role.value}")
    click.echo(f"Permissions: {', '.join(allowed)}")
