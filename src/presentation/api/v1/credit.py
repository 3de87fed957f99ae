"""Credit quote API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from src.application.dto import QuoteRequest
from src.application.services import QuoteService
from src.core.dependencies import get_quote_service
from src.core.metrics import track_quote_latency
from src.presentation.schemas import CreditResponseSchema, ErrorResponseSchema

credit_router = APIRouter(
    prefix="/credit",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Group or credit configuration not found"},
        500: {"model": ErrorResponseSchema, "description": "Bank missing in group stats"},
        502: {"model": ErrorResponseSchema, "description": "Config backend rejected the request"},
        503: {"model": ErrorResponseSchema, "description": "Config backend unavailable"},
    },
)


@credit_router.get(
    "",
    response_model=CreditResponseSchema,
    status_code=200,
    summary="Request Credit Quote",
    description="""
    Quote a lending rate for the given loan parameters.

    All parameters are validated against the bank's current credit
    configuration; every invalid parameter is reported. A successful
    quote is counted for the group owning the credentials.
    """,
    responses={
        200: {"description": "Quote calculated successfully"},
    },
)
async def get_credit(
    quote_service: Annotated[QuoteService, Depends(get_quote_service)],
    amount_in_euros: Annotated[
        Optional[str],
        Query(alias="amountInEuros", description="Loan amount in euros", examples=["10000"]),
    ] = None,
    term_in_months: Annotated[
        Optional[str],
        Query(alias="termInMonths", description="Loan term in months", examples=["6"]),
    ] = None,
    rating_level: Annotated[
        Optional[str],
        Query(alias="ratingLevel", description="Credit rating, any case", examples=["A"]),
    ] = None,
    delay_in_milliseconds: Annotated[
        Optional[str],
        Query(alias="delayInMilliseconds", description="Artificial response delay", examples=["0"]),
    ] = None,
    username: Annotated[
        Optional[str],
        Query(description="Group username", examples=["LoanBrokerGruppe01"]),
    ] = None,
    password: Annotated[
        Optional[str],
        Query(description="Group password"),
    ] = None,
) -> CreditResponseSchema:
    """
    Request a credit quote.

    Parameters arrive untyped; validation happens in the quote service so
    that all violations can be reported together.
    """
    request = QuoteRequest(
        amount_in_euros=amount_in_euros,
        term_in_months=term_in_months,
        rating_level=rating_level,
        delay_in_milliseconds=delay_in_milliseconds,
        username=username,
        password=password,
    )

    with track_quote_latency():
        response = await quote_service.get_quote(request)

    return CreditResponseSchema(
        lending_rate_in_percent=response.lending_rate_in_percent,
    )
