"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from src.application.services import (
    CreditService,
    CreditValidationService,
    QuoteService,
    TrackingService,
)
from src.domain.interfaces import BankClient, ConfigBackendClient, GroupClient
from src.infrastructure.clients import (
    HttpBankClient,
    HttpConfigBackendClient,
    HttpGroupClient,
)


# External client dependencies
def get_config_backend_client() -> ConfigBackendClient:
    """Get a ConfigBackendClient instance."""
    return HttpConfigBackendClient()


def get_bank_client(
    config_backend: Annotated[ConfigBackendClient, Depends(get_config_backend_client)],
) -> BankClient:
    """Get a BankClient instance."""
    return HttpBankClient(config_backend)


def get_group_client(
    config_backend: Annotated[ConfigBackendClient, Depends(get_config_backend_client)],
) -> GroupClient:
    """Get a GroupClient instance."""
    return HttpGroupClient(config_backend)


# Service dependencies
def get_validation_service(
    bank_client: Annotated[BankClient, Depends(get_bank_client)],
) -> CreditValidationService:
    """Get a CreditValidationService instance."""
    return CreditValidationService(bank_client)


def get_credit_service(
    bank_client: Annotated[BankClient, Depends(get_bank_client)],
) -> CreditService:
    """Get a CreditService instance."""
    return CreditService(bank_client)


def get_tracking_service(
    group_client: Annotated[GroupClient, Depends(get_group_client)],
) -> TrackingService:
    """Get a TrackingService instance."""
    return TrackingService(group_client)


def get_quote_service(
    validation_service: Annotated[CreditValidationService, Depends(get_validation_service)],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
    tracking_service: Annotated[TrackingService, Depends(get_tracking_service)],
) -> QuoteService:
    """Get a QuoteService instance with all dependencies."""
    return QuoteService(
        validation_service=validation_service,
        credit_service=credit_service,
        tracking_service=tracking_service,
    )
