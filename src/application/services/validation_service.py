"""Validation service - checks quote requests against the bank's bounds."""

import structlog

from src.application.dto import QuoteRequest, ValidatedQuoteRequest
from src.domain.exceptions import QuoteValidationException
from src.domain.interfaces import BankClient
from src.service.validation import credit_rules, evaluate

logger = structlog.get_logger(__name__)


class CreditValidationService:
    """
    Application service validating raw quote requests.

    The rule set is rebuilt for every request from bounds fetched from the
    config backend, so bound changes take effect immediately.
    """

    def __init__(self, bank_client: BankClient):
        self._bank_client = bank_client

    async def validate(self, request: QuoteRequest) -> ValidatedQuoteRequest:
        """
        Validate a raw quote request.

        Args:
            request: Raw parameters, any of which may be absent

        Returns:
            The request parsed to native types

        Raises:
            QuoteValidationException: With one reason per offending field
            CreditConfigurationNotFoundException: If the bank has no bounds
            ConfigBackendException: If the bounds could not be fetched
        """
        config = await self._bank_client.get_credit_configuration()

        reasons = evaluate(credit_rules(config), request.to_fields())
        if reasons:
            logger.info("quote_request_invalid", reasons=reasons)
            raise QuoteValidationException(reasons)

        return ValidatedQuoteRequest.from_raw(request)
