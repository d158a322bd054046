"""In-memory fake gateways for testing.

These implement the same abstract interfaces as the logging gateways but
only record what they were asked to do.  Pass the same ``call_log`` to
both fakes to check the order of calls across them.
"""

from __future__ import annotations

from ticketing.domain.gateway.payment_gateway import TicketPaymentGateway
from ticketing.domain.gateway.seat_reservation_gateway import SeatReservationGateway


class FakeTicketPaymentGateway(TicketPaymentGateway):

    def __init__(self, call_log: list[tuple] | None = None) -> None:
        self.payments: list[tuple[int, int]] = []
        self._call_log = call_log if call_log is not None else []

    def make_payment(self, account_id: int, amount: int) -> None:
        self.payments.append((account_id, amount))
        self._call_log.append(("make_payment", account_id, amount))


class FakeSeatReservationGateway(SeatReservationGateway):

    def __init__(self, call_log: list[tuple] | None = None) -> None:
        self.reservations: list[tuple[int, int]] = []
        self._call_log = call_log if call_log is not None else []

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        self.reservations.append((account_id, seat_count))
        self._call_log.append(("reserve_seat", account_id, seat_count))


class PaymentDeclined(Exception):
    pass


class DecliningPaymentGateway(TicketPaymentGateway):

    def make_payment(self, account_id: int, amount: int) -> None:
        raise PaymentDeclined(f"Card declined for account {account_id}")


class SeatsUnavailable(Exception):
    pass


class UnavailableSeatReservationGateway(SeatReservationGateway):

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        raise SeatsUnavailable(f"No seats left for account {account_id}")
