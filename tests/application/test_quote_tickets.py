"""Integration tests for the QuoteTickets use case."""

import pytest

from ticketing.application.quote_tickets import QuoteTicketsHandler
from ticketing.domain.exceptions import InvalidPurchaseException
from ticketing.domain.model.pricing import PricingConfig
from ticketing.domain.model.ticket import TicketCategory, TicketLineItem

PRICING = PricingConfig(adult_price=25, child_price=15, infant_price=0, max_tickets=25)


class TestQuoteTickets:

    def test_quote_totals(self):
        handler = QuoteTicketsHandler(PRICING)
        dto = handler.handle(1, [
            TicketLineItem(TicketCategory.ADULT, 5),
            TicketLineItem(TicketCategory.CHILD, 5),
            TicketLineItem(TicketCategory.INFANT, 5),
        ])
        assert dto.account_id == 1
        assert (dto.adults, dto.children, dto.infants) == (5, 5, 5)
        assert dto.total_price == 200
        assert dto.total_seats == 10

    def test_quote_applies_the_same_rules(self):
        handler = QuoteTicketsHandler(PRICING)
        with pytest.raises(InvalidPurchaseException) as exc:
            handler.handle(1, [TicketLineItem(TicketCategory.CHILD, 10)])
        assert str(exc.value) == "No adult ticket exists. Invalid ticket request."

    def test_quote_checks_account(self):
        handler = QuoteTicketsHandler(PRICING)
        with pytest.raises(InvalidPurchaseException, match="Invalid account id"):
            handler.handle(0, [TicketLineItem(TicketCategory.ADULT, 1)])
