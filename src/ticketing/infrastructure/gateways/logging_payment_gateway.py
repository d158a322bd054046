"""Stand-in TicketPaymentGateway that records charges in the log.

Used by the CLI in place of a real payment provider.
"""

from __future__ import annotations

from loguru import logger

from ticketing.domain.gateway.payment_gateway import TicketPaymentGateway


class LoggingTicketPaymentGateway(TicketPaymentGateway):

    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("Charged account {} an amount of {}", account_id, amount)
