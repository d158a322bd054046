"""Ticket value types shared across the domain.

A purchase request is a sequence of TicketLineItems.  The aggregator folds
them into a TicketCounts which the calculators and business rules read.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TicketCategory(Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketLineItem:
    """One line of a purchase request: a category and how many tickets.

    Nothing is checked here.  The validation engine decides whether the
    item is acceptable, so a rejected request can still be described.
    """

    category: TicketCategory
    count: int


@dataclass
class TicketCounts:
    """Per-category totals for a single purchase attempt."""

    adults: int = 0
    children: int = 0
    infants: int = 0

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants
