"""Base domain exception."""

from typing import List


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Every domain error can be rendered as a list of human-readable
    reasons; most carry exactly one.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        self.reasons: List[str] = [message]
        super().__init__(self.message)
