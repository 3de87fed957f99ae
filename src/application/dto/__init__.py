"""Data Transfer Objects for application layer."""

from .quote import QuoteRequest, QuoteResponse, ValidatedQuoteRequest

__all__ = [
    "QuoteRequest",
    "QuoteResponse",
    "ValidatedQuoteRequest",
]
