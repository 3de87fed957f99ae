"""Rating level enumeration used for credit-worthiness classes."""

from enum import Enum
from typing import List


class RatingLevel(str, Enum):
    """
    Ordered credit-worthiness classes, best first.

    The order of declaration is the ordinal used for range checks.
    There is no level M.
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"

    @property
    def ordinal(self) -> int:
        """Position of this level in the declared order."""
        return list(RatingLevel).index(self)

    @classmethod
    def between(cls, minimum: "RatingLevel", maximum: "RatingLevel") -> List["RatingLevel"]:
        """All levels whose ordinal lies within [minimum, maximum]."""
        return [
            level for level in cls
            if minimum.ordinal <= level.ordinal <= maximum.ordinal
        ]

    @classmethod
    def parse(cls, value: str) -> "RatingLevel | None":
        """Case-insensitive lookup by name, None if unknown."""
        return cls.__members__.get(value.upper())
