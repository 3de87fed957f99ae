"""
Unit Tests for domain entities and settings.

These tests verify:
1. Config backend records decode from their camelCase wire form
2. Group updates never mutate the original
3. The config backend URL is assembled from its parts
"""

from src.core.config import Settings
from src.domain.entities import Bank, Group, RatingLevel
from tests.factories import SYNC_BANK_NAME, get_first_group


BANK_JSON = {
    "_id": "vbank",
    "name": "vbank",
    "thumbnailUrl": "http://localhost:8085/picture.jpg",
    "isAsync": False,
    "isActive": True,
    "creditConfiguration": {
        "minAmountInEuros": 10000,
        "maxAmountInEuros": 50000,
        "minTermInMonths": 6,
        "maxTermInMonths": 36,
        "minSchufaRating": "A",
        "maxSchufaRating": "P",
    },
    "unknownField": "ignored",
}


class TestBank:

    def test_decodes_wire_format(self):
        bank = Bank.model_validate(BANK_JSON)

        assert bank.jms_queue == "vbank"
        assert bank.credit_configuration.min_amount_in_euros == 10_000
        assert bank.credit_configuration.max_schufa_rating is RatingLevel.P

    def test_credit_configuration_is_optional(self):
        data = {key: value for key, value in BANK_JSON.items() if key != "creditConfiguration"}

        assert Bank.model_validate(data).credit_configuration is None


class TestGroup:

    def test_encodes_wire_format(self):
        data = get_first_group().model_dump(mode="json", by_alias=True)

        assert set(data) == {
            "_id",
            "username",
            "password",
            "jmsQueue",
            "students",
            "stats",
            "hasPassed",
        }

    def test_matches_both_credentials(self):
        group = get_first_group()

        assert group.matches(group.username, group.password)
        assert not group.matches(group.username, "wrong-password")
        assert not group.matches("someone-else", group.password)

    def test_increment_returns_a_copy(self):
        group = get_first_group()

        updated = group.with_incremented_stat(SYNC_BANK_NAME)

        assert updated.stats[SYNC_BANK_NAME] == 1
        assert group.stats[SYNC_BANK_NAME] == 0
        assert updated.id == group.id


class TestSettings:

    def test_config_backend_url(self):
        settings = Settings(
            config_backend_protocol="https",
            config_backend_host="config.example",
            config_backend_port=9000,
            config_backend_api_version="v2",
        )

        assert settings.config_backend_url == "https://config.example:9000/v2/"
