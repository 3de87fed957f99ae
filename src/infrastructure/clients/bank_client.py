"""HTTP implementation of BankClient."""

import structlog

from src.core.config import settings
from src.domain.entities import Bank, CreditConfiguration
from src.domain.exceptions import CreditConfigurationNotFoundException
from src.domain.interfaces import BankClient, ConfigBackendClient

from .paths import BANKS_PATH

logger = structlog.get_logger(__name__)


class HttpBankClient(BankClient):
    """
    Reads bank records, and with them the credit bounds, from the config backend.

    Nothing is cached: every call goes to the backend.
    """

    def __init__(
        self,
        config_backend: ConfigBackendClient,
        default_bank_id: str | None = None,
    ):
        self._config_backend = config_backend
        self._default_bank_id = default_bank_id or settings.bank_id

    async def get_bank(self, bank_id: str | None = None) -> Bank:
        return await self._config_backend.get(
            f"{BANKS_PATH}/{bank_id or self._default_bank_id}",
            Bank,
        )

    async def get_credit_configuration(
        self,
        bank_id: str | None = None,
    ) -> CreditConfiguration:
        bank = await self.get_bank(bank_id)

        if bank.credit_configuration is None:
            logger.warning(
                "credit_configuration_missing",
                bank_id=bank_id or self._default_bank_id,
                bank_name=bank.name,
            )
            raise CreditConfigurationNotFoundException()

        return bank.credit_configuration
