"""
Declarative constraints for quote request fields.

Each constraint is a small immutable value that knows how to check a raw
string and how to phrase its violation. Field rules are plain data, so the
rule set for a request can be built from remotely fetched bounds and
evaluated by the generic interpreter in `engine`.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from src.domain.entities import RatingLevel

_WHOLE_NUMBER = re.compile(r"[0-9]+")
_SIGNED_WHOLE_NUMBER = re.compile(r"-?[0-9]+")

LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1


def is_whole_number(value: str) -> bool:
    """Digits only, at least one."""
    return _WHOLE_NUMBER.fullmatch(value) is not None


def is_signed_whole_number(value: str) -> bool:
    """Digits with an optional leading minus."""
    return _SIGNED_WHOLE_NUMBER.fullmatch(value) is not None


def compare_whole_number(value: str, bound: int) -> int:
    """
    Sign of `value - bound` for a digits-only `value`.

    Compares digit strings, so values of any length work without an int
    conversion.
    """
    if bound < 0:
        return 1
    digits = value.lstrip("0") or "0"
    limit = str(bound)
    if len(digits) != len(limit):
        return -1 if len(digits) < len(limit) else 1
    return (digits > limit) - (digits < limit)


def to_long(value: str) -> Optional[int]:
    """Signed whole number within the signed 64-bit range, else None."""
    if not is_signed_whole_number(value):
        return None
    digits = value.lstrip("-").lstrip("0") or "0"
    if len(digits) > len(str(LONG_MAX)):
        return None
    number = -int(digits) if value.startswith("-") else int(digits)
    return number if LONG_MIN <= number <= LONG_MAX else None


@dataclass(frozen=True)
class WholeNumber:
    message: str = "must be a whole number"

    def check(self, value: str) -> bool:
        return is_whole_number(value)


@dataclass(frozen=True)
class SignedWholeNumber:
    message: str = "must be a whole number"

    def check(self, value: str) -> bool:
        return is_signed_whole_number(value)


@dataclass(frozen=True)
class Minimum:
    """Inclusive lower bound; non-numbers pass and are left to WholeNumber."""

    bound: int

    @property
    def message(self) -> str:
        return f"must be at least '{self.bound}'"

    def check(self, value: str) -> bool:
        return not is_whole_number(value) or compare_whole_number(value, self.bound) >= 0


@dataclass(frozen=True)
class Maximum:
    """Inclusive upper bound; non-numbers pass and are left to WholeNumber."""

    bound: int

    @property
    def message(self) -> str:
        return f"must be at most '{self.bound}'"

    def check(self, value: str) -> bool:
        return not is_whole_number(value) or compare_whole_number(value, self.bound) <= 0


@dataclass(frozen=True)
class OneOfRatings:
    """Case-insensitive membership in an inclusive rating range."""

    minimum: RatingLevel
    maximum: RatingLevel

    @property
    def allowed(self) -> Tuple[RatingLevel, ...]:
        return tuple(RatingLevel.between(self.minimum, self.maximum))

    @property
    def message(self) -> str:
        names = [level.name.upper() for level in self.allowed]
        names += [level.name.lower() for level in self.allowed]
        return "must be one of: " + ", ".join(f"'{name}'" for name in names)

    def check(self, value: str) -> bool:
        level = RatingLevel.parse(value)
        if level is None or value not in (level.name, level.name.lower()):
            return False
        return self.minimum.ordinal <= level.ordinal <= self.maximum.ordinal


@dataclass(frozen=True)
class MinLength:
    length: int

    @property
    def message(self) -> str:
        return f"must have at least {self.length} characters"

    def check(self, value: str) -> bool:
        return len(value) >= self.length


@dataclass(frozen=True)
class MaxLength:
    length: int

    @property
    def message(self) -> str:
        return f"must have at most {self.length} characters"

    def check(self, value: str) -> bool:
        return len(value) <= self.length


Constraint = Union[
    WholeNumber,
    SignedWholeNumber,
    Minimum,
    Maximum,
    OneOfRatings,
    MinLength,
    MaxLength,
]


@dataclass(frozen=True)
class FieldRules:
    """
    Constraints for one required field.

    Attributes:
        field: Name of the field as it appears in requests and messages
        constraints: Checked in order; the first violation is reported
    """

    field: str
    constraints: Tuple[Constraint, ...] = ()
