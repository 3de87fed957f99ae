"""HTTP implementation of ConfigBackendClient."""

import asyncio
from dataclasses import dataclass
from typing import Any, Type, TypeVar, Union

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from src.core.config import settings
from src.core.metrics import (
    record_config_backend_attempt,
    record_config_backend_retry,
    track_config_backend_latency,
)
from src.domain.exceptions import (
    RemoteRejectedException,
    RemoteUnavailableException,
)
from src.domain.interfaces import ConfigBackendClient

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Success:
    """A 2xx answer."""

    response: httpx.Response


@dataclass(frozen=True)
class RetryableFailure:
    """A 5xx answer or a transport error; status_code is None for the latter."""

    status_code: int | None
    detail: str


@dataclass(frozen=True)
class TerminalFailure:
    """A 4xx answer, retrying cannot fix it."""

    status_code: int
    detail: str


Outcome = Union[Success, RetryableFailure, TerminalFailure]


def classify(response: httpx.Response) -> Outcome:
    """Map an HTTP response to an attempt outcome."""
    if response.status_code >= 500:
        return RetryableFailure(response.status_code, response.text[:200])
    if response.status_code >= 400:
        return TerminalFailure(response.status_code, response.text[:200])
    return Success(response)


class HttpConfigBackendClient(ConfigBackendClient):
    """
    HTTP client for the config backend.

    Every call makes at most `max_retries + 1` attempts. 5xx answers and
    transport errors are retried with exponential backoff, 4xx answers
    end the call after the first attempt.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url or settings.config_backend_url
        self._timeout = timeout or settings.config_backend_timeout
        self._max_retries = (
            settings.config_backend_max_retries if max_retries is None else max_retries
        )
        self._backoff_seconds = (
            settings.config_backend_backoff_seconds
            if backoff_seconds is None
            else backoff_seconds
        )
        self._transport = transport

    async def get(self, path: str, response_type: Type[T]) -> T:
        response = await self._request("GET", path)
        return self._decode(response, response_type)

    async def put(self, path: str, body: Any, response_type: Type[T]) -> T:
        response = await self._request("PUT", path, json=body)
        return self._decode(response, response_type)

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Run the retry loop and return the first successful response."""
        max_attempts = max(self._max_retries, 0) + 1
        attempt = 0
        outcome: Outcome | None = None

        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            headers={"Accept": "application/json"},
            transport=self._transport,
        ) as client:
            while attempt < max_attempts:
                outcome = await self._attempt(client, method, path, **kwargs)
                attempt += 1

                if isinstance(outcome, Success):
                    return outcome.response

                if isinstance(outcome, TerminalFailure):
                    logger.warning(
                        "config_backend_rejected",
                        method=method,
                        path=path,
                        status_code=outcome.status_code,
                        response=outcome.detail,
                    )
                    raise RemoteRejectedException(
                        message=f"Config backend rejected {method} {path}: {outcome.detail}",
                        status_code=outcome.status_code,
                    )

                if attempt < max_attempts:
                    logger.warning(
                        "config_backend_retry",
                        method=method,
                        path=path,
                        status_code=outcome.status_code,
                        attempt=attempt,
                        max_retries=self._max_retries,
                    )
                    record_config_backend_retry(method)
                    if self._backoff_seconds > 0:
                        await asyncio.sleep(2 ** (attempt - 1) * self._backoff_seconds)

        logger.error(
            "config_backend_unavailable",
            method=method,
            path=path,
            status_code=outcome.status_code,
            attempts=attempt,
            error=outcome.detail,
        )
        raise RemoteUnavailableException(
            message=f"Config backend unavailable for {method} {path}: {outcome.detail}",
            status_code=outcome.status_code,
            attempts=attempt,
        )

    async def _attempt(
        self,
        client: httpx.AsyncClient,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> Outcome:
        """Issue one request and classify what came back."""
        try:
            with track_config_backend_latency(method):
                response = await client.request(method, path, **kwargs)
        except httpx.TimeoutException:
            outcome: Outcome = RetryableFailure(None, "timeout")
        except httpx.TransportError as e:
            outcome = RetryableFailure(None, f"{type(e).__name__}: {e}")
        else:
            outcome = classify(response)

        record_config_backend_attempt(method, _outcome_label(outcome))
        return outcome

    def _decode(self, response: httpx.Response, response_type: Type[T]) -> T:
        """Decode a JSON body into the requested type."""
        try:
            return TypeAdapter(response_type).validate_json(response.content)
        except ValidationError as e:
            logger.error(
                "config_backend_invalid_body",
                url=str(response.request.url),
                error=str(e),
            )
            raise RemoteRejectedException(
                message=f"Config backend returned an invalid body: {e.error_count()} errors",
                status_code=response.status_code,
            )


def _outcome_label(outcome: Outcome) -> str:
    if isinstance(outcome, Success):
        return "success"
    if isinstance(outcome, RetryableFailure):
        return "retryable"
    return "terminal"
