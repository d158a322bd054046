"""Pricing configuration read by the calculators and business rules."""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Defaults used when no configuration overrides them
# ---------------------------------------------------------------------------
DEFAULT_ADULT_TICKET_PRICE = 25
DEFAULT_CHILD_TICKET_PRICE = 15
DEFAULT_INFANT_TICKET_PRICE = 0
DEFAULT_MAX_TICKETS = 25


@dataclass(frozen=True)
class PricingConfig:
    """Whole-unit ticket prices and the per-purchase ticket cap.

    ``infant_price`` is carried for completeness but never charged:
    infants travel free on an adult's lap.
    """

    adult_price: int = DEFAULT_ADULT_TICKET_PRICE
    child_price: int = DEFAULT_CHILD_TICKET_PRICE
    infant_price: int = DEFAULT_INFANT_TICKET_PRICE
    max_tickets: int = DEFAULT_MAX_TICKETS
