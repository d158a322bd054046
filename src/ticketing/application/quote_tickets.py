"""Application service: Quote Tickets use case.

Runs the same checks and calculations as a purchase but stops before
touching any external system, returning the totals instead.
"""

from __future__ import annotations

from collections.abc import Sequence

from ticketing.application.dto import PurchaseQuoteDTO
from ticketing.domain.model.pricing import PricingConfig
from ticketing.domain.model.ticket import TicketLineItem
from ticketing.domain.service.calculators import (
    calculate_total_price,
    calculate_total_seats,
)
from ticketing.domain.service.purchase_validation import validate_and_count


class QuoteTicketsHandler:

    def __init__(self, pricing: PricingConfig) -> None:
        self._pricing = pricing

    def handle(
        self, account_id: int, line_items: Sequence[TicketLineItem]
    ) -> PurchaseQuoteDTO:
        counts = validate_and_count(account_id, line_items, self._pricing)

        return PurchaseQuoteDTO(
            account_id=account_id,
            adults=counts.adults,
            children=counts.children,
            infants=counts.infants,
            total_price=calculate_total_price(counts, self._pricing),
            total_seats=calculate_total_seats(counts),
        )
