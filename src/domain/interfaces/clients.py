"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import Any, List, Type, TypeVar

from src.domain.entities import Bank, CreditConfiguration, Group

T = TypeVar("T")


class ConfigBackendClient(ABC):
    """
    Abstract transport to the config backend.

    Implementations retry 5xx and connection failures a bounded number
    of times and never retry 4xx responses.
    """

    @abstractmethod
    async def get(self, path: str, response_type: Type[T]) -> T:
        """
        Fetch a resource and decode it.

        Args:
            path: Path relative to the versioned base URL
            response_type: Type the JSON body is decoded into

        Raises:
            RemoteRejectedException: On a 4xx or an undecodable body
            RemoteUnavailableException: When all attempts failed
        """
        ...

    @abstractmethod
    async def put(self, path: str, body: Any, response_type: Type[T]) -> T:
        """
        Replace a resource and decode the answer.

        Raises the same exceptions as `get`.
        """
        ...


class BankClient(ABC):
    """
    Abstract accessor for this bank's record on the config backend.
    """

    @abstractmethod
    async def get_bank(self, bank_id: str | None = None) -> Bank:
        """
        Fetch a bank record.

        Args:
            bank_id: The bank's identifier, the configured bank if omitted
        """
        ...

    @abstractmethod
    async def get_credit_configuration(
        self,
        bank_id: str | None = None,
    ) -> CreditConfiguration:
        """
        Fetch the credit bounds of a bank.

        Raises:
            CreditConfigurationNotFoundException: If the bank has none
        """
        ...


class GroupClient(ABC):
    """
    Abstract accessor for the group collection on the config backend.
    """

    @abstractmethod
    async def get_all_groups(self) -> List[Group]:
        """Fetch every group."""
        ...

    @abstractmethod
    async def update_group(self, group_id: str, group: Group) -> Group:
        """
        Replace a group with the given full body.

        Args:
            group_id: Identifier of the group to replace
            group: The complete updated group

        Returns:
            The group as stored by the config backend
        """
        ...
