"""Credit service - computes the lending rate of a quote."""

import asyncio
import random
from typing import Callable

import structlog

from src.domain.entities import Credit, RatingLevel
from src.domain.interfaces import BankClient
from src.service.validation import LONG_MAX

logger = structlog.get_logger(__name__)


class CreditService:
    """
    Computes pseudo lending rates.

    The rate is deterministic apart from one random term of at most 3.0
    and always lies within [0.0, 10.0).
    """

    DIVISOR_TERM_IN_MONTHS = 12
    DIVISOR_AMOUNT_IN_EUROS = 1_000
    DIVISOR_RATING_LEVEL = 10
    MULTIPLIER_LENDING_RATE = 3
    DIVISOR_LENDING_RATE = 10.0

    def __init__(
        self,
        bank_client: BankClient,
        random_source: Callable[[], float] = random.random,
    ):
        self._bank_client = bank_client
        self._random = random_source

    async def calculate_credit(
        self,
        amount_in_euros: int,
        term_in_months: int,
        rating_level: str,
        delay_in_milliseconds: int | None = None,
    ) -> Credit:
        """
        Wait for the requested delay, then compute the lending rate.

        Args:
            amount_in_euros: Requested amount
            term_in_months: Requested term
            rating_level: Rating name, any case
            delay_in_milliseconds: Artificial latency; None or negative means none,
                larger values are capped at the signed 64-bit maximum

        Returns:
            Credit with a lending rate in [0.0, 10.0)
        """
        delay = min(max(delay_in_milliseconds or 0, 0), LONG_MAX)
        await asyncio.sleep(delay / 1000)

        return Credit(
            lending_rate_in_percent=await self._calculate_lending_rate(
                amount_in_euros=amount_in_euros,
                term_in_months=term_in_months,
                rating_level=rating_level,
            ),
        )

    async def _calculate_lending_rate(
        self,
        amount_in_euros: int,
        term_in_months: int,
        rating_level: str,
    ) -> float:
        rate = float(term_in_months % self.DIVISOR_TERM_IN_MONTHS)
        rate += amount_in_euros % self.DIVISOR_AMOUNT_IN_EUROS
        rate += await self._rating_offset(rating_level) % self.DIVISOR_RATING_LEVEL
        rate += self._random() * self.MULTIPLIER_LENDING_RATE

        return rate % self.DIVISOR_LENDING_RATE

    async def _rating_offset(self, rating_level: str) -> int:
        """Distance of the rating's first letter from the bank's minimum rating."""
        config = await self._bank_client.get_credit_configuration()
        minimum: RatingLevel = config.min_schufa_rating

        return ord(rating_level.upper()[0]) - ord(minimum.name[0])
