"""
Domain Interfaces (Ports)
"""

from .clients import BankClient, ConfigBackendClient, GroupClient

__all__ = [
    "BankClient",
    "ConfigBackendClient",
    "GroupClient",
]
