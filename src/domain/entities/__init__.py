"""Domain Entities - Core business objects."""

from .bank import Bank, CreditConfiguration
from .credit import Credit
from .group import Group
from .rating import RatingLevel

__all__ = [
    "Bank",
    "CreditConfiguration",
    "Credit",
    "Group",
    "RatingLevel",
]
