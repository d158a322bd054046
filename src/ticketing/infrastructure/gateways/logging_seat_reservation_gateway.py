"""Stand-in SeatReservationGateway that records reservations in the log."""

from __future__ import annotations

from loguru import logger

from ticketing.domain.gateway.seat_reservation_gateway import SeatReservationGateway


class LoggingSeatReservationGateway(SeatReservationGateway):

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info("Reserved {} seats for account {}", seat_count, account_id)
