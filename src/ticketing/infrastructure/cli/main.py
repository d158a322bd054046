import click
from pydantic import ValidationError

from ticketing.infrastructure.cli.pricing_commands import pricing_show
from ticketing.infrastructure.cli.purchase_commands import purchase, quote
from ticketing.infrastructure.logging_config import configure_logging
from ticketing.infrastructure.settings import get_settings


@click.group()
def cli() -> None:
    """Tickets: cinema ticket purchasing"""
    try:
        settings = get_settings()
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    configure_logging(settings.LOG_LEVEL)


# Register subcommands
cli.add_command(purchase)
cli.add_command(quote)
cli.add_command(pricing_show)
