"""Application services (use cases)."""

from .credit_service import CreditService
from .quote_service import QuoteService
from .tracking_service import TrackingService
from .validation_service import CreditValidationService

__all__ = [
    "CreditService",
    "CreditValidationService",
    "QuoteService",
    "TrackingService",
]
