"""
Unit Tests for group usage tracking.

These tests verify:
1. The matching group's counter for this bank is raised by exactly one
2. Unknown credentials and missing counters fail without writing
3. Backend failures propagate
"""

from unittest.mock import AsyncMock

import pytest

from src.application.services import TrackingService
from src.domain.exceptions import (
    BankNotInStatsException,
    GroupNotFoundException,
    RemoteUnavailableException,
)
from tests.factories import (
    DEFAULT_PASSWORD,
    FIRST_GROUP_USERNAME,
    JMS_BANK_A_NAME,
    SCHUFA_BANK_NAME,
    SYNC_BANK_NAME,
    THIRD_GROUP_ID,
    THIRD_GROUP_USERNAME,
    get_first_group,
    get_third_group,
)


@pytest.fixture
def service(group_client: AsyncMock) -> TrackingService:
    return TrackingService(group_client, SYNC_BANK_NAME)


class TestTrackRequest:
    """Tests for TrackingService.track_request."""

    @pytest.mark.asyncio
    async def test_increments_only_this_banks_counter(
        self,
        service: TrackingService,
        group_client: AsyncMock,
    ):
        await service.track_request(THIRD_GROUP_USERNAME, DEFAULT_PASSWORD)

        group_client.update_group.assert_awaited_once()
        group_id, updated = group_client.update_group.await_args.args
        assert group_id == THIRD_GROUP_ID
        assert updated.stats == {
            SCHUFA_BANK_NAME: 0,
            SYNC_BANK_NAME: 1,
            JMS_BANK_A_NAME: 0,
        }

    @pytest.mark.asyncio
    async def test_other_fields_are_written_back_unchanged(
        self,
        service: TrackingService,
        group_client: AsyncMock,
    ):
        await service.track_request(THIRD_GROUP_USERNAME, DEFAULT_PASSWORD)

        _, updated = group_client.update_group.await_args.args
        original = get_third_group()
        assert updated.model_dump(exclude={"stats"}) == original.model_dump(exclude={"stats"})

    @pytest.mark.asyncio
    async def test_existing_count_is_raised_by_one(self, group_client: AsyncMock):
        group_client.get_all_groups.return_value = [
            get_first_group(stats={SYNC_BANK_NAME: 41}),
        ]

        await TrackingService(group_client, SYNC_BANK_NAME).track_request(
            FIRST_GROUP_USERNAME, DEFAULT_PASSWORD
        )

        _, updated = group_client.update_group.await_args.args
        assert updated.stats == {SYNC_BANK_NAME: 42}

    @pytest.mark.asyncio
    async def test_no_groups(self, service: TrackingService, group_client: AsyncMock):
        group_client.get_all_groups.return_value = []

        with pytest.raises(GroupNotFoundException) as exc_info:
            await service.track_request(FIRST_GROUP_USERNAME, DEFAULT_PASSWORD)

        assert exc_info.value.reasons == ["[group not found]"]
        group_client.update_group.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_username(self, service: TrackingService, group_client: AsyncMock):
        with pytest.raises(GroupNotFoundException):
            await service.track_request("LoanBrokerGruppe99", DEFAULT_PASSWORD)

        group_client.update_group.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_wrong_password(self, service: TrackingService, group_client: AsyncMock):
        with pytest.raises(GroupNotFoundException):
            await service.track_request(FIRST_GROUP_USERNAME, "9876543210")

        group_client.update_group.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_credentials_are_case_sensitive(
        self,
        service: TrackingService,
        group_client: AsyncMock,
    ):
        with pytest.raises(GroupNotFoundException):
            await service.track_request(FIRST_GROUP_USERNAME.lower(), DEFAULT_PASSWORD)

    @pytest.mark.asyncio
    async def test_bank_missing_in_stats(self, group_client: AsyncMock):
        service = TrackingService(group_client, "otherBank")

        with pytest.raises(BankNotInStatsException) as exc_info:
            await service.track_request(FIRST_GROUP_USERNAME, DEFAULT_PASSWORD)

        assert exc_info.value.code == "INVALID_STATE"
        assert exc_info.value.reasons == ["[bank not found in stats]"]
        group_client.update_group.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_failure_propagates(
        self,
        service: TrackingService,
        group_client: AsyncMock,
    ):
        group_client.update_group.side_effect = RemoteUnavailableException(
            "down", status_code=503, attempts=3
        )

        with pytest.raises(RemoteUnavailableException):
            await service.track_request(FIRST_GROUP_USERNAME, DEFAULT_PASSWORD)

    @pytest.mark.asyncio
    async def test_defaults_to_configured_bank_name(self, group_client: AsyncMock):
        """The default settings quote for the vbank."""
        await TrackingService(group_client).track_request(
            FIRST_GROUP_USERNAME, DEFAULT_PASSWORD
        )

        _, updated = group_client.update_group.await_args.args
        assert updated.stats[SYNC_BANK_NAME] == 1
