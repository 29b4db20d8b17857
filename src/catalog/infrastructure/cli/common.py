"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Callable

import click

from catalog.application.error_mapping import error_response
from catalog.domain.exceptions import AuthorizationError, DomainException
from catalog.domain.model.user import Permission, UserIdentity
from catalog.domain.model.value_objects import parse_decimal
from catalog.infrastructure.bootstrap import authentication_service
from catalog.infrastructure.config import StorageSettings


def credential_options(func: Callable) -> Callable:
    """Add ``--username`` / ``--password`` (also read from the environment)."""
    func = click.option(
        "--password",
        envvar="CATALOG_PASSWORD",
        default=None,
        help="Password (or CATALOG_PASSWORD).",
    )(func)
    func = click.option(
        "--username",
        envvar="CATALOG_USERNAME",
        default=None,
        help="Username (or CATALOG_USERNAME).",
    )(func)
    return func


def json_option(func: Callable) -> Callable:
    return click.option(
        "--json", "as_json", is_flag=True, default=False,
        help="Print the JSON API envelope instead of a table.",
    )(func)


def require(permission: Permission, username: str | None, password: str | None) -> UserIdentity:
    """Resolve the caller's identity and check *permission*."""
    service = authentication_service()
    identity = service.authenticate(username, password)
    if identity is None:
        raise AuthorizationError("Invalid username or password")
    service.authorize(identity, permission)
    return identity


def decimal_option(ctx: click.Context, param: click.Parameter, value: str | None) -> Decimal | None:
    """Click callback turning a numeric option into a Decimal."""
    if value is None:
        return None
    parsed = parse_decimal(value)
    if parsed is None:
        raise click.BadParameter(f"'{value}' is not a number.")
    return parsed


def echo_json(payload: dict) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def fail(exc: DomainException, settings: StorageSettings, as_json: bool) -> None:
    """Report a domain error and stop with a non-zero exit code."""
    if as_json:
        echo_json(error_response(exc, expose_details=settings.is_development))
        click.get_current_context().exit(1)
    raise click.ClickException(str(exc))
