"""Command line interface for encoding and checking anonymous tokens."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from anonsts import (
    ValidatorConfig,
    AnonymousAuthenticationToken,
    BinarySecurityToken,
    ReceivedToken,
    TokenState,
    TokenValidatorParameters,
    get_validator,
    load_config,
)
from anonsts.constants import ANONYMOUS_TOKEN_VALUE_TYPE

app = typer.Typer(help="CLI for anonymous STS tokens")

# Command groups
token_app = typer.Typer(help="Commands for working with anonymous tokens")

app.add_typer(token_app, name="token")


def _load_config_or_exit() -> ValidatorConfig:
    try:
        return load_config()
    except (ValidationError, yaml.YAMLError) as e:
        typer.secho(f"Invalid configuration: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, help="Logging level (defaults to the configured level)"
    ),
) -> None:
    """anonsts CLI entry point."""
    level = (log_level or _load_config_or_exit().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@token_app.command("encode")
def token_encode(
    ip_address: str,
    realm: Optional[str] = typer.Option(None, help="Realm to scope the token to"),
) -> None:
    """
    Print the encoded credential string for an anonymous token.

    Example:
        anonsts token encode 10.0.0.5 --realm DDF
    """
    token = AnonymousAuthenticationToken(realm=realm, ip_address=ip_address)
    typer.echo(token.encoded_credentials)


@token_app.command("validate")
def token_validate(
    value: str,
    value_type: str = typer.Option(
        ANONYMOUS_TOKEN_VALUE_TYPE, help="Declared value type of the token"
    ),
    realm: Optional[str] = typer.Option(None, help="Realm hint passed to the validator"),
    supported_realm: Optional[List[str]] = typer.Option(
        None, help="Supported realm (repeatable, defaults to configuration)"
    ),
) -> None:
    """
    Validate an encoded anonymous credential string.

    Prints whether the validator claims the token, the resulting state and
    the principal. Exits with code 1 unless the token is VALID.

    Example:
        anonsts token validate "$(anonsts token encode 10.0.0.5)"
        anonsts token validate <value> --supported-realm DDF --supported-realm karaf
    """
    realms = supported_realm or _load_config_or_exit().supported_realms
    validator = get_validator(supported_realms=realms)
    target = ReceivedToken(token=BinarySecurityToken(value_type=value_type, value=value))

    can_handle = validator.can_handle_token(target, realm)
    response = validator.validate_token(
        TokenValidatorParameters(token=target, realm=realm)
    )

    typer.echo(f"can_handle\t{can_handle}")
    typer.echo(f"state\t{target.state.value}")
    typer.echo(f"principal\t{target.principal or '-'}")

    if target.state != TokenState.VALID:
        if response.principal is not None:
            typer.echo(f"claimed\t{response.principal}")
        typer.secho("Token is not valid", fg=typer.colors.RED)
        raise typer.Exit(code=1)


@app.command("realms")
def realms() -> None:
    """List the supported realms from configuration."""
    config = _load_config_or_exit()
    for realm in config.supported_realms:
        typer.echo(realm)
