"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ticketing.domain.model.pricing import PricingConfig
from ticketing.infrastructure.gateways.logging_payment_gateway import (
    LoggingTicketPaymentGateway,
)
from ticketing.infrastructure.gateways.logging_seat_reservation_gateway import (
    LoggingSeatReservationGateway,
)
from ticketing.infrastructure.settings import get_settings


def pricing() -> PricingConfig:
    return get_settings().to_pricing()


def payment_gateway() -> LoggingTicketPaymentGateway:
    return LoggingTicketPaymentGateway()


def seat_reservation_gateway() -> LoggingSeatReservationGateway:
    return LoggingSeatReservationGateway()
