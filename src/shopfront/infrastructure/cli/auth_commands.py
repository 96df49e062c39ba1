"""CLI commands for signing in and the user profile."""

from __future__ import annotations

import asyncio

import click

from shopfront.infrastructure.bootstrap import build_app
from shopfront.infrastructure.config import Settings


@click.command("login")
@click.option("--email", prompt=True, help="Account email.")
@click.option("--password", prompt=True, hide_input=True, help="Account password.")
@click.pass_obj
def login(settings: Settings, email: str, password: str) -> None:
    """Check credentials against the sign-in service."""
    app = build_app(settings)

    if not asyncio.run(app.auth.login(email, password)):
        raise click.ClickException(app.auth.error or "Sign-in failed")

    click.echo(f"Signed in as {email}")


@click.command("show")
@click.pass_obj
def profile_show(settings: Settings) -> None:
    """Show the demo user profile."""
    profile = build_app(settings).profile.profile
    click.echo(f"Name:    {profile.name}")
    click.echo(f"Email:   {profile.email}")
    click.echo(f"Phone:   {profile.phone}")
    click.echo(f"Address: {profile.address}")
