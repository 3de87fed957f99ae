"""HTTP implementation of GroupClient."""

from typing import List

from src.domain.entities import Group
from src.domain.interfaces import ConfigBackendClient, GroupClient

from .paths import GROUPS_PATH


class HttpGroupClient(GroupClient):
    """Reads and replaces groups on the config backend."""

    def __init__(self, config_backend: ConfigBackendClient):
        self._config_backend = config_backend

    async def get_all_groups(self) -> List[Group]:
        return await self._config_backend.get(GROUPS_PATH, List[Group])

    async def update_group(self, group_id: str, group: Group) -> Group:
        return await self._config_backend.put(
            f"{GROUPS_PATH}/{group_id}",
            group.model_dump(mode="json", by_alias=True),
            Group,
        )
