"""Tracking service - counts which groups used this bank."""

import structlog

from src.core.config import settings
from src.core.metrics import record_usage_tracked
from src.domain.exceptions import BankNotInStatsException, GroupNotFoundException
from src.domain.interfaces import GroupClient

logger = structlog.get_logger(__name__)


class TrackingService:
    """
    Application service recording group usage per bank.

    The read of all groups and the write of the updated group are two
    separate calls to the config backend. Two concurrent requests of the
    same group can both read the old counter, and the later write wins.
    The backend offers no compare-and-swap, so this race is accepted.
    """

    def __init__(self, group_client: GroupClient, bank_name: str | None = None):
        self._group_client = group_client
        self._bank_name = bank_name or settings.bank_name

    async def track_request(self, username: str, password: str) -> None:
        """
        Increment this bank's counter of the group owning the credentials.

        Raises:
            GroupNotFoundException: If no group has these credentials
            BankNotInStatsException: If the group has no counter for this bank
        """
        groups = await self._group_client.get_all_groups()

        group = next((g for g in groups if g.matches(username, password)), None)
        if group is None:
            record_usage_tracked("group_not_found")
            logger.warning("group_not_found", username=username, groups=len(groups))
            raise GroupNotFoundException()

        if self._bank_name not in group.stats:
            record_usage_tracked("bank_not_in_stats")
            logger.error(
                "bank_not_in_stats",
                group_id=group.id,
                bank_name=self._bank_name,
            )
            raise BankNotInStatsException(self._bank_name)

        updated = group.with_incremented_stat(self._bank_name)
        await self._group_client.update_group(group.id, updated)

        record_usage_tracked("tracked")
        logger.info(
            "usage_tracked",
            group_id=group.id,
            bank_name=self._bank_name,
            count=updated.stats[self._bank_name],
        )
