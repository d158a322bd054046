"""Process-wide settings, loaded once from the environment.

Field names match the environment variables they are read from, so
``ADULT_TICKET_PRICE=30 tickets quote ...`` works without a prefix.
A ``.env`` file in the working directory is read too, if present.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticketing.domain.model.pricing import (
    DEFAULT_ADULT_TICKET_PRICE,
    DEFAULT_CHILD_TICKET_PRICE,
    DEFAULT_INFANT_TICKET_PRICE,
    DEFAULT_MAX_TICKETS,
    PricingConfig,
)


class TicketSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    ADULT_TICKET_PRICE: int = Field(default=DEFAULT_ADULT_TICKET_PRICE, ge=0)
    CHILD_TICKET_PRICE: int = Field(default=DEFAULT_CHILD_TICKET_PRICE, ge=0)
    INFANT_TICKET_PRICE: int = Field(default=DEFAULT_INFANT_TICKET_PRICE, ge=0)
    MAX_TICKETS: int = Field(default=DEFAULT_MAX_TICKETS, ge=1)

    LOG_LEVEL: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalise_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def to_pricing(self) -> PricingConfig:
        return PricingConfig(
            adult_price=self.ADULT_TICKET_PRICE,
            child_price=self.CHILD_TICKET_PRICE,
            infant_price=self.INFANT_TICKET_PRICE,
            max_tickets=self.MAX_TICKETS,
        )


@lru_cache(maxsize=1)
def get_settings() -> TicketSettings:
    return TicketSettings()
