"""Application service: Purchase Tickets use case.

Validates the request, works out the totals, then charges the account
and reserves seats, in that order and once each.  Nothing reaches either
gateway unless every check passes.

A failure raised by a gateway propagates as-is.  If seat reservation
fails after payment succeeded, the charge is not refunded here.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from ticketing.domain.gateway.payment_gateway import TicketPaymentGateway
from ticketing.domain.gateway.seat_reservation_gateway import SeatReservationGateway
from ticketing.domain.model.pricing import PricingConfig
from ticketing.domain.model.ticket import TicketLineItem
from ticketing.domain.service.calculators import (
    calculate_total_price,
    calculate_total_seats,
)
from ticketing.domain.service.purchase_validation import validate_and_count


class PurchaseTicketsHandler:

    def __init__(
        self,
        payment_gateway: TicketPaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
        pricing: PricingConfig,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway
        self._pricing = pricing

    def handle(self, account_id: int, line_items: Sequence[TicketLineItem]) -> None:
        """Purchase the requested tickets for an account.

        Steps:
        1. Check the account id and every line item.
        2. Aggregate counts per category.
        3. Apply the business rules to the counts.
        4. Compute the total price and seat count.
        5. Charge the account.
        6. Reserve the seats.
        """
        counts = validate_and_count(account_id, line_items, self._pricing)

        total_price = calculate_total_price(counts, self._pricing)
        total_seats = calculate_total_seats(counts)

        logger.info(
            "Purchase accepted for account {}: {} adult, {} child, {} infant "
            "(price={}, seats={})",
            account_id,
            counts.adults,
            counts.children,
            counts.infants,
            total_price,
            total_seats,
        )

        # Payment always precedes reservation
        self._payment_gateway.make_payment(account_id, total_price)
        logger.debug("Payment of {} taken for account {}", total_price, account_id)

        self._seat_reservation_gateway.reserve_seat(account_id, total_seats)
        logger.debug("{} seats reserved for account {}", total_seats, account_id)
