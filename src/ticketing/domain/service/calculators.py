"""Domain services: total price and seat count for a purchase.

Both are pure functions of the aggregated counts.  Infants neither pay
nor occupy a seat, whatever price the configuration gives them.
"""

from __future__ import annotations

from ticketing.domain.model.pricing import PricingConfig
from ticketing.domain.model.ticket import TicketCounts


def calculate_total_price(counts: TicketCounts, pricing: PricingConfig) -> int:
    return counts.adults * pricing.adult_price + counts.children * pricing.child_price


def calculate_total_seats(counts: TicketCounts) -> int:
    return counts.adults + counts.children
