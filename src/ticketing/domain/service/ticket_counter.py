"""Domain service: fold a purchase request into per-category totals."""

from __future__ import annotations

from collections.abc import Iterable

from ticketing.domain.model.ticket import TicketCategory, TicketCounts, TicketLineItem


def count_tickets(line_items: Iterable[TicketLineItem]) -> TicketCounts:
    """Sum line item counts into a fresh TicketCounts.

    Assumes the items already passed structural validation.  An item whose
    category is not a TicketCategory member contributes to no total.
    """
    counts = TicketCounts()
    for item in line_items:
        if item.category is TicketCategory.ADULT:
            counts.adults += item.count
        elif item.category is TicketCategory.CHILD:
            counts.children += item.count
        elif item.category is TicketCategory.INFANT:
            counts.infants += item.count
    return counts
