"""CLI command for issuing a credential, mainly for local testing."""

from __future__ import annotations

import click

from foodlane.domain.exceptions import DomainException
from foodlane.infrastructure.auth.jwt_tokens import JwtTokenIssuer
from foodlane.infrastructure.config import Settings


@click.command("issue")
@click.option("--email", required=True, help="Identity to sign.")
def token_issue(email: str) -> None:
    """Print a signed token for EMAIL."""
    settings = Settings.from_env()
    try:
        issuer = JwtTokenIssuer(settings.require_secret(), ttl_seconds=settings.token_ttl_seconds)
        click.echo(issuer.issue({"email": email}))
    except (RuntimeError, DomainException) as exc:
        raise click.ClickException(str(exc))
