"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PurchaseQuoteDTO:
    """Output: what a purchase would charge and reserve."""

    account_id: int
    adults: int
    children: int
    infants: int
    total_price: int
    total_seats: int
