"""CLI command for inspecting the loaded pricing configuration."""

from __future__ import annotations

import click

from ticketing.infrastructure.bootstrap import pricing


@click.command("pricing")
def pricing_show() -> None:
    """Show ticket prices and the per-purchase limit."""
    config = pricing()

    click.echo(f"  {'Category':<10} {'Price':>8}")
    click.echo(f"  {'-'*19}")
    click.echo(f"  {'Adult':<10} {config.adult_price:>8}")
    click.echo(f"  {'Child':<10} {config.child_price:>8}")
    click.echo(f"  {'Infant':<10} {'free':>8}")
    click.echo(f"  {'-'*19}")
    click.echo(f"  Max tickets per purchase: {config.max_tickets}")
