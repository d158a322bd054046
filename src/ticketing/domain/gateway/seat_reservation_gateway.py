"""Abstract gateway for the external seat reservation system."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SeatReservationGateway(ABC):

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve *seat_count* seats for the account.  Raises on failure."""
