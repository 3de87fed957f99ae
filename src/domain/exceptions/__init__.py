"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .quote import (
    BankNotInStatsException,
    CreditConfigurationNotFoundException,
    GroupNotFoundException,
    InvalidStateException,
    NotFoundException,
    QuoteValidationException,
)
from .remote import (
    ConfigBackendException,
    RemoteRejectedException,
    RemoteUnavailableException,
)

__all__ = [
    "DomainException",
    "QuoteValidationException",
    "NotFoundException",
    "CreditConfigurationNotFoundException",
    "GroupNotFoundException",
    "InvalidStateException",
    "BankNotInStatsException",
    "ConfigBackendException",
    "RemoteRejectedException",
    "RemoteUnavailableException",
]
