"""External API client implementations."""

from .bank_client import HttpBankClient
from .config_backend_client import HttpConfigBackendClient
from .group_client import HttpGroupClient

__all__ = [
    "HttpBankClient",
    "HttpConfigBackendClient",
    "HttpGroupClient",
]
