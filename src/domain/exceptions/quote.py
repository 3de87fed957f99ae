"""Quote-related domain exceptions."""

from typing import List

from .base import DomainException


class QuoteValidationException(DomainException):
    """Raised when one or more quote request fields are invalid."""

    def __init__(self, reasons: List[str]):
        super().__init__(
            message="; ".join(reasons),
            code="INVALID_REQUEST",
        )
        self.reasons = list(reasons)


class NotFoundException(DomainException):
    """Raised when a required remote record does not exist."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="NOT_FOUND",
        )


class CreditConfigurationNotFoundException(NotFoundException):
    """Raised when the bank record carries no credit configuration."""

    MESSAGE = "[creditConfiguration not found]"

    def __init__(self):
        super().__init__(self.MESSAGE)


class GroupNotFoundException(NotFoundException):
    """Raised when no group matches the given credentials."""

    MESSAGE = "[group not found]"

    def __init__(self):
        super().__init__(self.MESSAGE)


class InvalidStateException(DomainException):
    """Raised when remote data contradicts what this service relies on."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_STATE",
        )


class BankNotInStatsException(InvalidStateException):
    """Raised when a matched group has no stats counter for this bank."""

    MESSAGE = "[bank not found in stats]"

    def __init__(self, bank_name: str):
        super().__init__(self.MESSAGE)
        self.bank_name = bank_name
