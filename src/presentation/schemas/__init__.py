"""Pydantic schemas for API request/response validation."""

from .credit import CreditResponseSchema
from .error import ErrorResponseSchema

__all__ = [
    "CreditResponseSchema",
    "ErrorResponseSchema",
]
