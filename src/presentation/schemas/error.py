"""Pydantic schema for API error responses."""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "error": "INVALID_REQUEST",
                    "status": "BAD_REQUEST",
                    "reasons": [
                        "amountInEuros is required",
                        "password must have at least 8 characters",
                    ],
                    "dateTime": "2026-10-19T12:00:00Z",
                    "requestId": "abc123",
                }
            ]
        },
    )

    error: str = Field(
        ...,
        description="Error code",
        examples=["INVALID_REQUEST"],
    )
    status: str = Field(
        ...,
        description="HTTP status classification",
        examples=["BAD_REQUEST"],
    )
    reasons: List[str] = Field(
        ...,
        min_length=1,
        description="Human-readable reasons, in field order for validation errors",
    )
    date_time: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="dateTime",
        description="When the error occurred (UTC)",
    )
    request_id: str | None = Field(
        None,
        alias="requestId",
        description="Request ID for tracing",
    )
