"""Command-line interface for encoding and decoding tokens."""

from __future__ import annotations

import json
from types import ModuleType
from typing import Any

import click
import structlog
from pydantic import ValidationError
from safir.click import display_help

from .claims import Claims
from .config import Algorithm, Config
from .constants import LOGGER_NAME
from .exceptions import DecodeError
from .jws import hs256, hs384, hs512

_BINDINGS: dict[Algorithm, ModuleType] = {
    Algorithm.HS256: hs256,
    Algorithm.HS384: hs384,
    Algorithm.HS512: hs512,
}
"""Module implementing each supported algorithm."""

__all__ = ["decode", "encode", "help", "main"]


def _load_config() -> Config:
    """Load the configuration from the environment and set up logging."""
    try:
        config = Config()
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e!s}") from e
    config.configure_logging()
    return config


def _get_secret(config: Config) -> str:
    if not config.secret:
        msg = "HSJWT_SECRET environment variable is required"
        raise click.UsageError(msg)
    return config.secret.get_secret_value()


def _parse_claim(claim: str) -> tuple[str, Any]:
    """Parse a ``name=value`` claim, treating the value as JSON if possible."""
    if "=" not in claim:
        msg = f"Claim {claim} not of the form NAME=VALUE"
        raise click.BadParameter(msg, param_hint="--claim")
    name, value = claim.split("=", 1)
    try:
        return name, json.loads(value)
    except json.JSONDecodeError:
        return name, value


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s")
def main() -> None:
    """Create and verify HMAC-signed JSON Web Tokens.

    The shared secret is taken from the HSJWT_SECRET environment variable.
    """


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic)


@main.command()
@click.option(
    "--claim",
    "-c",
    "claims",
    multiple=True,
    metavar="NAME=VALUE",
    help="Claim to include. Values are parsed as JSON if possible.",
)
@click.option(
    "--algorithm",
    type=click.Choice([a.value for a in Algorithm]),
    default=None,
    help="Signing algorithm [default: HSJWT_ALGORITHM or HS256]",
)
def encode(*, claims: tuple[str, ...], algorithm: str | None) -> None:
    """Print a signed token containing the given claims."""
    config = _load_config()
    secret = _get_secret(config)
    alg = Algorithm(algorithm) if algorithm else config.algorithm
    logger = structlog.get_logger(LOGGER_NAME)

    token_claims = Claims()
    for claim in claims:
        name, value = _parse_claim(claim)
        token_claims.insert_unsafe(name, value)
    token = _BINDINGS[alg].encode(token_claims, secret)
    logger.debug(
        "Encoded token", algorithm=alg.value, claims=len(token_claims)
    )
    click.echo(token)


@main.command()
@click.argument("token")
@click.option(
    "--algorithm",
    type=click.Choice([a.value for a in Algorithm]),
    default=None,
    help="Signing algorithm [default: HSJWT_ALGORITHM or HS256]",
)
def decode(*, token: str, algorithm: str | None) -> None:
    """Verify a token and print its claims as JSON."""
    config = _load_config()
    secret = _get_secret(config)
    alg = Algorithm(algorithm) if algorithm else config.algorithm
    try:
        claims = _BINDINGS[alg].decode(token.strip(), secret)
    except DecodeError as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(claims.to_json(), indent=2, sort_keys=True))
