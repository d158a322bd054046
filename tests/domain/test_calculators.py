"""Unit tests for the price and seat calculators."""

import pytest

from ticketing.domain.model.pricing import PricingConfig
from ticketing.domain.model.ticket import TicketCounts
from ticketing.domain.service.calculators import (
    calculate_total_price,
    calculate_total_seats,
)

PRICING = PricingConfig(adult_price=25, child_price=15, infant_price=0, max_tickets=25)


# ── Price ────────────────────────────────────────────────────────────────────


class TestCalculateTotalPrice:

    def test_adults_and_children(self):
        counts = TicketCounts(adults=4, children=3)
        assert calculate_total_price(counts, PRICING) == 4 * 25 + 3 * 15

    @pytest.mark.parametrize("infants", [0, 1, 4, 20])
    def test_infants_never_pay(self, infants):
        counts = TicketCounts(adults=4, children=3, infants=infants)
        assert calculate_total_price(counts, PRICING) == 145

    def test_configured_infant_price_is_ignored(self):
        pricing = PricingConfig(adult_price=20, child_price=10, infant_price=99)
        counts = TicketCounts(adults=2, children=1, infants=2)
        assert calculate_total_price(counts, pricing) == 50

    def test_uses_configured_prices(self):
        pricing = PricingConfig(adult_price=30, child_price=12)
        assert calculate_total_price(TicketCounts(adults=1, children=2), pricing) == 54

    def test_zero_counts_cost_nothing(self):
        assert calculate_total_price(TicketCounts(), PRICING) == 0


# ── Seats ────────────────────────────────────────────────────────────────────


class TestCalculateTotalSeats:

    def test_adults_and_children(self):
        assert calculate_total_seats(TicketCounts(adults=2, children=3)) == 5

    @pytest.mark.parametrize("infants", [0, 1, 5])
    def test_infants_sit_on_laps(self, infants):
        counts = TicketCounts(adults=5, children=3, infants=infants)
        assert calculate_total_seats(counts) == 8
