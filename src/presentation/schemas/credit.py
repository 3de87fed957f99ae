"""Credit-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CreditResponseSchema(BaseModel):
    """Schema for GET /v1/credit response body."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "lendingRateInPercent": 4.71,
                }
            ]
        },
    )

    lending_rate_in_percent: float = Field(
        ...,
        alias="lendingRateInPercent",
        ge=0.0,
        lt=10.0,
        description="Quoted lending rate in percent",
        examples=[4.71],
    )
