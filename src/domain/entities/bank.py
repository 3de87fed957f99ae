"""Bank entity and its credit configuration as served by the config backend."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .rating import RatingLevel


class CreditConfiguration(BaseModel):
    """
    Immutable snapshot of the bounds a quote request must satisfy.

    Fetched fresh for every use and never cached. min <= max is
    guaranteed by the config backend and not re-checked here.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    min_amount_in_euros: int
    max_amount_in_euros: int
    min_term_in_months: int
    max_term_in_months: int
    min_schufa_rating: RatingLevel
    max_schufa_rating: RatingLevel


class Bank(BaseModel):
    """A bank participating in the lending exercise."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    jms_queue: str = Field(alias="_id")
    name: str
    thumbnail_url: str = ""
    is_async: bool = False
    is_active: bool = True
    credit_configuration: Optional[CreditConfiguration] = None
