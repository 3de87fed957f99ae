"""Quote service - orchestrates the credit quote use case."""

import structlog

from src.application.dto import QuoteRequest, QuoteResponse
from src.core.metrics import record_quote
from src.domain.exceptions import (
    ConfigBackendException,
    DomainException,
    InvalidStateException,
    NotFoundException,
    QuoteValidationException,
)

from .credit_service import CreditService
from .tracking_service import TrackingService
from .validation_service import CreditValidationService

logger = structlog.get_logger(__name__)


class QuoteService:
    """
    Application service for credit quote use cases.

    Validation, calculation and tracking run strictly in sequence and the
    first failure ends the request. A quote is only returned once usage
    was tracked.
    """

    def __init__(
        self,
        validation_service: CreditValidationService,
        credit_service: CreditService,
        tracking_service: TrackingService,
    ):
        self._validation = validation_service
        self._credit = credit_service
        self._tracking = tracking_service

    async def get_quote(self, request: QuoteRequest) -> QuoteResponse:
        """
        Process a credit quote request.

        Args:
            request: Raw quote parameters

        Returns:
            QuoteResponse with the lending rate

        Raises:
            QuoteValidationException: If request validation fails
            NotFoundException: If bounds or the group are missing
            InvalidStateException: If the group has no counter for this bank
            ConfigBackendException: If the config backend fails
        """
        try:
            validated = await self._validation.validate(request)

            log = logger.bind(
                username=validated.username,
                amount_in_euros=validated.amount_in_euros,
                term_in_months=validated.term_in_months,
                rating_level=validated.rating_level.value,
            )
            log.info("quote_requested")

            credit = await self._credit.calculate_credit(
                amount_in_euros=validated.amount_in_euros,
                term_in_months=validated.term_in_months,
                rating_level=validated.rating_level.value,
                delay_in_milliseconds=validated.delay_in_milliseconds,
            )
            log.info("quote_calculated", lending_rate=credit.lending_rate_in_percent)

            await self._tracking.track_request(
                username=validated.username,
                password=validated.password,
            )
        except DomainException as e:
            record_quote(_outcome_of(e))
            raise

        record_quote("quoted", credit.lending_rate_in_percent)
        return QuoteResponse.from_entity(credit)


def _outcome_of(exc: DomainException) -> str:
    if isinstance(exc, QuoteValidationException):
        return "invalid"
    if isinstance(exc, NotFoundException):
        return "not_found"
    if isinstance(exc, InvalidStateException):
        return "invalid_state"
    if isinstance(exc, ConfigBackendException):
        return "backend_error"
    return "error"
