"""CLI commands for quoting and purchasing tickets."""

from __future__ import annotations

import click

from ticketing.application.dto import PurchaseQuoteDTO
from ticketing.application.purchase_tickets import PurchaseTicketsHandler
from ticketing.application.quote_tickets import QuoteTicketsHandler
from ticketing.domain.exceptions import InvalidPurchaseException
from ticketing.domain.model.ticket import TicketCategory, TicketLineItem
from ticketing.infrastructure.bootstrap import (
    payment_gateway,
    pricing,
    seat_reservation_gateway,
)


def _parse_items(raw: str) -> list[TicketLineItem]:
    """Parse 'ADULT:2,CHILD:1' into a TicketLineItem list."""
    items: list[TicketLineItem] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'Category:Count'."
            )
        name, count_str = pair.rsplit(":", 1)
        try:
            category = TicketCategory[name.strip().upper()]
        except KeyError:
            choices = ", ".join(c.value for c in TicketCategory)
            raise click.BadParameter(
                f"Unknown ticket category '{name.strip()}'. Expected one of: {choices}."
            )
        try:
            count = int(count_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid count '{count_str}' for category '{name.strip()}'."
            )
        items.append(TicketLineItem(category=category, count=count))
    return items


def _display_quote(dto: PurchaseQuoteDTO) -> None:
    click.echo(f"Account #{dto.account_id}")
    click.echo()
    click.echo(f"  {'Category':<10} {'Qty':>5}")
    click.echo(f"  {'-'*16}")
    click.echo(f"  {'Adult':<10} {dto.adults:>5}")
    click.echo(f"  {'Child':<10} {dto.children:>5}")
    click.echo(f"  {'Infant':<10} {dto.infants:>5}")
    click.echo(f"  {'-'*16}")
    click.echo(f"  {'Seats':<10} {dto.total_seats:>5}")
    click.echo(f"  {'Total':<10} {dto.total_price:>5}")


@click.command("quote")
@click.option("--account", "account_id", required=True, type=int, help="Account ID.")
@click.option("--items", required=True, help="Tickets as 'Category:Count,Category:Count'.")
def quote(account_id: int, items: str) -> None:
    """Show what a purchase would cost without buying anything."""
    line_items = _parse_items(items)
    handler = QuoteTicketsHandler(pricing=pricing())

    try:
        dto = handler.handle(account_id, line_items)
    except InvalidPurchaseException as exc:
        raise click.ClickException(str(exc))

    _display_quote(dto)


@click.command("purchase")
@click.option("--account", "account_id", required=True, type=int, help="Account ID.")
@click.option("--items", required=True, help="Tickets as 'Category:Count,Category:Count'.")
def purchase(account_id: int, items: str) -> None:
    """Pay for and reserve tickets for an account."""
    line_items = _parse_items(items)
    handler = PurchaseTicketsHandler(
        payment_gateway=payment_gateway(),
        seat_reservation_gateway=seat_reservation_gateway(),
        pricing=pricing(),
    )

    try:
        handler.handle(account_id, line_items)
    except InvalidPurchaseException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase complete for account #{account_id}.")
