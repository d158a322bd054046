"""Abstract gateway for the external ticket payment processor.

Defined in the domain layer so the purchase flow never depends on a
concrete payment provider.  Implementations live in infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TicketPaymentGateway(ABC):

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge *amount* to the account.  Raises on failure."""
