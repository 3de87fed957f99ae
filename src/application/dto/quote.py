"""Data transfer objects for credit quote operations."""

from dataclasses import dataclass
from typing import Dict, Optional

from src.domain.entities import Credit, RatingLevel
from src.service.validation.credit import (
    AMOUNT_IN_EUROS,
    DELAY_IN_MILLISECONDS,
    PASSWORD,
    RATING_LEVEL,
    TERM_IN_MONTHS,
    USERNAME,
)
from src.service.validation.rules import to_long


@dataclass(frozen=True)
class QuoteRequest:
    """Raw quote parameters as received; any of them may be absent."""

    amount_in_euros: Optional[str] = None
    term_in_months: Optional[str] = None
    rating_level: Optional[str] = None
    delay_in_milliseconds: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_fields(self) -> Dict[str, Optional[str]]:
        """Values keyed by their request parameter names."""
        return {
            AMOUNT_IN_EUROS: self.amount_in_euros,
            TERM_IN_MONTHS: self.term_in_months,
            RATING_LEVEL: self.rating_level,
            DELAY_IN_MILLISECONDS: self.delay_in_milliseconds,
            USERNAME: self.username,
            PASSWORD: self.password,
        }


@dataclass(frozen=True)
class ValidatedQuoteRequest:
    """Quote parameters after validation, parsed to native types."""

    amount_in_euros: int
    term_in_months: int
    rating_level: RatingLevel
    delay_in_milliseconds: Optional[int]
    username: str
    password: str

    @classmethod
    def from_raw(cls, request: QuoteRequest) -> "ValidatedQuoteRequest":
        """
        Parse a request that already passed validation.

        Numbers are parsed without converting leading zeros, so padded values
        of any length work. Amount and term are within their bounds by now; a
        delay outside the signed 64-bit range parses to None, meaning no delay.
        """
        return cls(
            amount_in_euros=to_long(request.amount_in_euros),
            term_in_months=to_long(request.term_in_months),
            rating_level=RatingLevel.parse(request.rating_level),
            delay_in_milliseconds=to_long(request.delay_in_milliseconds),
            username=request.username,
            password=request.password,
        )


@dataclass(frozen=True)
class QuoteResponse:
    """Response data for a credit quote."""

    lending_rate_in_percent: float

    @classmethod
    def from_entity(cls, credit: Credit) -> "QuoteResponse":
        return cls(lending_rate_in_percent=credit.lending_rate_in_percent)
