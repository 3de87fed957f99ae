"""Group entity representing a client team tracked for statistics."""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Group(BaseModel):
    """
    A client team identified by its credential pair.

    `stats` maps bank names to the number of requests the group sent to
    that bank. Owned by the config backend; this service only reads all
    groups and writes one back.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    id: str = Field(alias="_id")
    username: str
    password: str
    jms_queue: str
    students: List[str] = Field(default_factory=list)
    stats: Dict[str, int] = Field(default_factory=dict)
    has_passed: bool = False

    def matches(self, username: str, password: str) -> bool:
        """Exact match on both credentials."""
        return self.username == username and self.password == password

    def with_incremented_stat(self, bank_name: str) -> "Group":
        """Copy of this group with the counter for `bank_name` raised by one."""
        stats = dict(self.stats)
        stats[bank_name] = stats[bank_name] + 1
        return self.model_copy(update={"stats": stats})
