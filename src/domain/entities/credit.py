"""Credit entity holding a computed lending rate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Credit:
    """
    A quoted credit.

    Attributes:
        lending_rate_in_percent: Always within [0.0, 10.0)
    """

    lending_rate_in_percent: float
