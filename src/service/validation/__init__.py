"""
Request Validation Module for the vbank credit service
"""

from .credit import credit_rules
from .engine import evaluate
from .rules import (
    FieldRules,
    LONG_MAX,
    LONG_MIN,
    Maximum,
    MaxLength,
    Minimum,
    MinLength,
    OneOfRatings,
    SignedWholeNumber,
    WholeNumber,
    compare_whole_number,
    to_long,
)

__all__ = [
    "credit_rules",
    "evaluate",
    "FieldRules",
    "Maximum",
    "MaxLength",
    "Minimum",
    "MinLength",
    "OneOfRatings",
    "SignedWholeNumber",
    "WholeNumber",
    "LONG_MAX",
    "LONG_MIN",
    "compare_whole_number",
    "to_long",
]
