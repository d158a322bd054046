"""Domain service: purchase validation.

Every purchase attempt passes through the checks below in a fixed order,
and the first violation aborts the attempt:

  1. account id format
  2. presence of ticket requests
  3. structure of every line item, in the order supplied
  4. business rules over the aggregated counts (``BUSINESS_RULES``)

``validate_and_count`` runs all four and hands back the counts.

Business rules are plain named values.  Each one returns the violation
message, or None when the counts satisfy it, so the ordered tuple can be
evaluated left to right and stop at the first message.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ticketing.domain.exceptions import InvalidPurchaseException
from ticketing.domain.model.pricing import PricingConfig
from ticketing.domain.model.ticket import TicketCounts, TicketLineItem
from ticketing.domain.service.ticket_counter import count_tickets


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# --- Request-level checks -----------------------------------------------------


def validate_account_id(account_id: object) -> None:
    if not _is_int(account_id) or account_id <= 0:  # type: ignore[operator]
        raise InvalidPurchaseException("Invalid account id")


def validate_ticket_requests(line_items: object) -> None:
    """Reject an absent or empty request, then check each item in turn."""
    if not isinstance(line_items, (list, tuple)) or not line_items:
        raise InvalidPurchaseException("No ticket requests supplied")

    for item in line_items:
        validate_line_item(item)


def validate_line_item(item: object) -> None:
    if not isinstance(item, TicketLineItem):
        raise InvalidPurchaseException("Invalid ticket request type")

    if not _is_int(item.count) or item.count <= 0:
        raise InvalidPurchaseException("Number of tickets must be greater than zero")


# --- Business rules -----------------------------------------------------------


@dataclass(frozen=True)
class BusinessRule:
    """A named constraint over the aggregated counts of one purchase."""

    name: str
    check: Callable[[TicketCounts, PricingConfig], str | None]


def _within_max_tickets(counts: TicketCounts, pricing: PricingConfig) -> str | None:
    if counts.total > pricing.max_tickets:
        return f"Cannot purchase more than {pricing.max_tickets} tickets"
    return None


def _adult_present(counts: TicketCounts, pricing: PricingConfig) -> str | None:
    if counts.adults <= 0:
        return "No adult ticket exists. Invalid ticket request."
    return None


def _infants_have_laps(counts: TicketCounts, pricing: PricingConfig) -> str | None:
    # One infant per adult lap; equal numbers are fine.
    if counts.infants > counts.adults:
        return (
            "Adults cannot be less than infants, "
            "as one infant needs one adult to sit on their lap."
        )
    return None


MAX_TICKETS_RULE = BusinessRule("max_tickets", _within_max_tickets)
ADULT_PRESENT_RULE = BusinessRule("adult_present", _adult_present)
INFANT_ADULT_RATIO_RULE = BusinessRule("infant_adult_ratio", _infants_have_laps)

BUSINESS_RULES: tuple[BusinessRule, ...] = (
    MAX_TICKETS_RULE,
    ADULT_PRESENT_RULE,
    INFANT_ADULT_RATIO_RULE,
)


def first_violation(
    counts: TicketCounts,
    pricing: PricingConfig,
    rules: tuple[BusinessRule, ...] = BUSINESS_RULES,
) -> str | None:
    """Return the message of the first rule the counts break, or None."""
    for rule in rules:
        message = rule.check(counts, pricing)
        if message is not None:
            return message
    return None


def check_business_rules(counts: TicketCounts, pricing: PricingConfig) -> None:
    message = first_violation(counts, pricing)
    if message is not None:
        raise InvalidPurchaseException(message)


# --- Full pipeline ------------------------------------------------------------


def validate_and_count(
    account_id: object, line_items: object, pricing: PricingConfig
) -> TicketCounts:
    """Run every check in order and return the counts of an acceptable request."""
    validate_account_id(account_id)
    validate_ticket_requests(line_items)

    counts = count_tickets(line_items)  # type: ignore[arg-type]
    check_business_rules(counts, pricing)
    return counts
